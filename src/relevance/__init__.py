"""
Term relevance scoring for word clouds.

- Tokenization with stopword, length and number filtering
- Corpus-wide TF-IDF, summed per term
- Top-k ranking and square-root display scaling
"""

from .config import ScorerConfig
from .documents import (
    Document,
    InvalidDocument,
    ScoredTerm,
    TokenizedDocument,
    coerce_document,
    coerce_documents,
)
from .index import load_documents
from .scale import sqrt_scale
from .scorer import (
    RelevanceScorer,
    aggregate_scores,
    count_terms,
    document_frequencies,
    inverse_document_frequency,
    rank_terms,
    scale_terms,
    score,
    to_cloud_words,
)
from .stopwords import STOPWORDS
from .tokenizer import iter_tokens, tokenize

__all__ = [
    "Document",
    "TokenizedDocument",
    "ScoredTerm",
    "InvalidDocument",
    "coerce_document",
    "coerce_documents",
    "load_documents",
    "ScorerConfig",
    "RelevanceScorer",
    "score",
    "count_terms",
    "document_frequencies",
    "inverse_document_frequency",
    "aggregate_scores",
    "rank_terms",
    "scale_terms",
    "sqrt_scale",
    "to_cloud_words",
    "STOPWORDS",
    "iter_tokens",
    "tokenize",
]
