"""
Loading the document index behind the site's word cloud.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Tuple

from .documents import Document, InvalidDocument, coerce_document

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]
INDEX_PATH = Path(os.getenv("WORDCLOUD_INDEX_PATH", ROOT / "data" / "wordcloud" / "index.json"))


def _parse_entries(path: Path) -> List[Tuple[str, Any]]:
    """Return (location, entry) pairs; location is `path:line` for JSONL, `path[i]` otherwise."""
    with path.open("r", encoding="utf-8") as f:
        if path.suffix == ".jsonl":
            entries = []
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    entries.append((f"{path}:{line_no}", json.loads(line)))
                except json.JSONDecodeError as e:
                    raise InvalidDocument(f"{path}:{line_no}: not valid JSON ({e.msg})") from e
            return entries
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidDocument(f"{path}: not valid JSON ({e.msg})") from e
    if not isinstance(data, list):
        raise InvalidDocument(f"{path}: expected a JSON array of documents")
    return [(f"{path}[{i}]", obj) for i, obj in enumerate(data)]


def load_documents(path: Path | str | None = None) -> List[Document]:
    """
    Load documents from a JSON array (`.json`) or JSON Lines (`.jsonl`) file.

    Each entry needs a `text` and an `id` (or `link`). Raises
    FileNotFoundError when the file is missing and InvalidDocument for
    malformed entries.
    """
    path = Path(path) if path is not None else INDEX_PATH
    if not path.exists():
        raise FileNotFoundError(f"document index not found at {path}")

    documents: List[Document] = []
    for location, obj in _parse_entries(path):
        try:
            documents.append(coerce_document(obj))
        except InvalidDocument as e:
            raise InvalidDocument(f"{location}: {e}") from e
    if not documents:
        logger.warning("Document index %s is empty", path)
    return documents
