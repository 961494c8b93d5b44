"""
Document records consumed and produced by the relevance scorer.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, List, Mapping, Union


class InvalidDocument(ValueError):
    """Raised when an input document lacks a usable identifier or text."""


@dataclasses.dataclass(frozen=True)
class Document:
    """A single input document: an opaque identifier and its raw text."""

    id: str
    text: str


@dataclasses.dataclass
class TokenizedDocument:
    """Per-document term counts; `total` counts filtered tokens only."""

    id: str
    term_counts: Dict[str, int]
    total: int


@dataclasses.dataclass
class ScoredTerm:
    """A ranked term with its TF-IDF score and its size on the display scale."""

    text: str
    raw_score: float
    display_size: float


DocumentLike = Union[Document, Mapping[str, Any]]


def coerce_document(item: DocumentLike, position: int | None = None) -> Document:
    """
    Turn a Document or a mapping into a validated Document.

    Mappings use `id`, falling back to `link` (the key used by the site's
    word-cloud index), and `text`. A present but empty text is valid.
    """
    where = f" at position {position}" if position is not None else ""
    if isinstance(item, Document):
        doc_id, text = item.id, item.text
    elif isinstance(item, Mapping):
        doc_id = item.get("id")
        if doc_id is None:
            doc_id = item.get("link")
        if doc_id is None:
            raise InvalidDocument(f"document{where} has no 'id' or 'link'")
        if "text" not in item:
            raise InvalidDocument(f"document {doc_id!r}{where} has no 'text'")
        text = item["text"]
    else:
        raise InvalidDocument(f"document{where} is a {type(item).__name__}, not a mapping")

    if not isinstance(doc_id, str):
        raise InvalidDocument(f"document{where} id must be a string, got {type(doc_id).__name__}")
    if not isinstance(text, str):
        raise InvalidDocument(
            f"document {doc_id!r}{where} text must be a string, got {type(text).__name__}"
        )
    if isinstance(item, Document):
        return item
    return Document(id=doc_id, text=text)


def coerce_documents(items: Iterable[DocumentLike]) -> List[Document]:
    """Validate every item up front; the first malformed one raises InvalidDocument."""
    return [coerce_document(item, position=i) for i, item in enumerate(items)]
