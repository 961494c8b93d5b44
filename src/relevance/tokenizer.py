"""
Tokenizer for word-cloud scoring.

Lowercases, strips everything outside an allow-list of characters, splits on
whitespace and drops short tokens, stopwords and bare numbers. There is no
stemming: "process" and "processes" are different terms.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List

from .stopwords import STOPWORDS

DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]")
DIGITS_RE = re.compile(r"[0-9]+")

DEFAULT_MIN_TERM_LENGTH = 3


def iter_tokens(
    text: str,
    *,
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH,
    stopwords: AbstractSet[str] = STOPWORDS,
) -> Iterable[str]:
    """Yield filtered tokens from text, in text order."""
    cleaned = DISALLOWED_RE.sub("", text.lower())
    for tok in cleaned.split():
        if len(tok) < min_term_length:
            continue
        if tok in stopwords:
            continue
        if DIGITS_RE.fullmatch(tok):
            continue
        yield tok


def tokenize(
    text: str,
    *,
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH,
    stopwords: AbstractSet[str] = STOPWORDS,
) -> List[str]:
    """Tokenize text into the terms that take part in scoring."""
    return list(iter_tokens(text, min_term_length=min_term_length, stopwords=stopwords))
