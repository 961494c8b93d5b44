"""
TF-IDF relevance scoring for word clouds.

Pipeline: tokenize every document, count terms per document, compute
document frequency and IDF per term, sum TF * IDF over the documents that
contain each term, rank, keep the top-k and map scores onto the display
scale.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .config import ScorerConfig
from .documents import (
    Document,
    DocumentLike,
    ScoredTerm,
    TokenizedDocument,
    coerce_documents,
)
from .scale import sqrt_scale
from .tokenizer import DEFAULT_MIN_TERM_LENGTH, tokenize

logger = logging.getLogger(__name__)


def count_terms(tokens: Iterable[str]) -> Tuple[Dict[str, int], int]:
    """Count occurrences per term; the total is the number of filtered tokens."""
    counts = Counter(tokens)
    return dict(counts), sum(counts.values())


def tokenize_document(
    document: Document, min_term_length: int = DEFAULT_MIN_TERM_LENGTH
) -> TokenizedDocument:
    counts, total = count_terms(tokenize(document.text, min_term_length=min_term_length))
    return TokenizedDocument(id=document.id, term_counts=counts, total=total)


def document_frequencies(docs: Sequence[TokenizedDocument]) -> Dict[str, int]:
    """Number of documents containing each term, keyed in first-seen order."""
    df: Dict[str, int] = {}
    for doc in docs:
        for term in doc.term_counts:
            df[term] = df.get(term, 0) + 1
    return df


def inverse_document_frequency(df: int, n_docs: int) -> float:
    """Smoothed IDF, ln(1 + N / df). Never zero for a non-empty corpus."""
    return math.log(1 + n_docs / (df or 1))


def aggregate_scores(docs: Sequence[TokenizedDocument]) -> Dict[str, float]:
    """
    Sum of TF-IDF over every document containing the term.

    Summing rather than averaging favours terms that are both locally
    frequent and spread over many documents.
    """
    n_docs = len(docs)
    df = document_frequencies(docs)
    idf = {term: inverse_document_frequency(count, n_docs) for term, count in df.items()}

    scores: Dict[str, float] = dict.fromkeys(df, 0.0)
    for doc in docs:
        # A document with total == 0 has no term_counts, so this loop never
        # divides by zero.
        for term, count in doc.term_counts.items():
            scores[term] += (count / doc.total) * idf[term]
    return scores


def rank_terms(scores: Dict[str, float], top_k: int) -> List[Tuple[str, float]]:
    """Sort descending by score and keep the first top_k; ties keep first-seen order."""
    ranked = sorted(scores.items(), key=lambda x: x[1], reverse=True)
    return ranked[:top_k]


def scale_terms(
    ranked: Sequence[Tuple[str, float]], output_range: Tuple[float, float]
) -> List[ScoredTerm]:
    sizes = sqrt_scale([s for _, s in ranked], output_range)
    return [
        ScoredTerm(text=term, raw_score=float(s), display_size=float(size))
        for (term, s), size in zip(ranked, sizes)
    ]


@dataclass
class RelevanceScorer:
    """Ranks the salient terms of a corpus and sizes them for a word cloud."""

    config: ScorerConfig = field(default_factory=ScorerConfig)

    def tokenize_all(self, documents: Sequence[Document]) -> List[TokenizedDocument]:
        """Tokenize and count each document, on a thread pool when workers > 1."""
        work = partial(tokenize_document, min_term_length=self.config.min_term_length)
        if self.config.workers > 1 and len(documents) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                return list(executor.map(work, documents))
        return [work(doc) for doc in documents]

    def score(self, documents: Iterable[DocumentLike]) -> List[ScoredTerm]:
        """
        Score a corpus.

        Args:
            documents: Document instances or mappings with `id` and `text`.

        Returns:
            At most `config.top_k` ScoredTerm objects, highest score first.

        Raises:
            InvalidDocument: if any document is malformed. Validation covers
                the whole input before scoring starts.
        """
        docs = coerce_documents(documents)
        tokenized = self.tokenize_all(docs)
        scores = aggregate_scores(tokenized)
        ranked = rank_terms(scores, self.config.top_k)
        logger.debug(
            "Scored %s documents: %s distinct terms, kept %s",
            len(docs),
            len(scores),
            len(ranked),
        )
        return scale_terms(ranked, self.config.output_range)


def score(
    documents: Iterable[DocumentLike], config: ScorerConfig | None = None
) -> List[ScoredTerm]:
    """Score a corpus with the given (or default) configuration."""
    return RelevanceScorer(config=config or ScorerConfig()).score(documents)


def to_cloud_words(terms: Iterable[ScoredTerm]) -> List[Dict[str, Any]]:
    """Renderer payload: `{"text", "size"}` per term, in ranking order."""
    return [{"text": t.text, "size": t.display_size} for t in terms]
