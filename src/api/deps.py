"""
Load the document index and precompute the word cloud (used in lifespan).
"""

from __future__ import annotations

import logging

from src.relevance import (
    Document,
    RelevanceScorer,
    ScoredTerm,
    ScorerConfig,
    load_documents,
)

logger = logging.getLogger(__name__)


def build_cloud_state() -> tuple[ScorerConfig, list[Document], list[ScoredTerm]]:
    """
    Load documents from the configured index and score them.
    Returns (config, documents, terms); both lists are empty when there is no index.
    """
    config = ScorerConfig.from_env()
    try:
        documents = load_documents()
    except FileNotFoundError as e:
        logger.warning("Word cloud disabled: %s", e)
        return config, [], []
    terms = RelevanceScorer(config=config).score(documents)
    logger.info("Word cloud ready: %s documents, %s terms", len(documents), len(terms))
    return config, documents, terms
