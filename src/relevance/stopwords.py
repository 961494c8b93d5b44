"""
Stopwords excluded from word-cloud scoring.
"""

from __future__ import annotations

from typing import FrozenSet

ENGLISH_STOPWORDS: FrozenSet[str] = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
        "any", "are", "as", "at",
        "be", "because", "been", "before", "being", "below", "between", "both", "but", "by",
        "can", "did", "do", "does", "doing", "don", "down", "during",
        "each", "few", "for", "from", "further",
        "had", "has", "have", "having", "he", "her", "here", "hers", "herself", "him",
        "himself", "his", "how",
        "i", "if", "in", "into", "is", "it", "its", "itself",
        "just", "me", "more", "most", "my", "myself",
        "no", "nor", "not", "now", "of", "off", "on", "once", "only", "or", "other", "our",
        "ours", "ourselves", "out", "over", "own",
        "s", "same", "she", "should", "so", "some", "such",
        "t", "than", "that", "the", "their", "theirs", "them", "themselves", "then",
        "there", "these", "they", "this", "those", "through", "to", "too",
        "under", "until", "up", "very",
        "was", "we", "were", "what", "when", "where", "which", "while", "who", "whom",
        "why", "will", "with", "would",
        "you", "your", "yours", "yourself", "yourselves",
    }
)

# Ordinals and filler verbs that dominate blog-style prose.
DOMAIN_STOPWORDS: FrozenSet[str] = frozenset(
    {
        "one", "two", "three", "four", "five",
        "first", "second", "third",
        "also", "like", "use", "using", "used", "get", "got", "make", "made",
    }
)

STOPWORDS: FrozenSet[str] = ENGLISH_STOPWORDS | DOMAIN_STOPWORDS
