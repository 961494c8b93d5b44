"""
Request and response models for the word-cloud API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class DocumentIn(BaseModel):
    """A document to score."""

    id: str = Field(..., description="Opaque identifier, e.g. a URL or path")
    text: str = Field(..., description="Raw text; may be empty")


class IndexEntry(BaseModel):
    """Entry of /wordcloud/index.json, keyed by `link` as the site expects."""

    link: str
    text: str


class WordCloudRequest(BaseModel):
    """Request body for POST /api/wordcloud."""

    documents: List[DocumentIn] = Field(default_factory=list)
    top_k: Optional[int] = Field(None, ge=1, le=1000)
    min_size: Optional[float] = Field(None, ge=0)
    max_size: Optional[float] = Field(None, ge=0)
    min_term_length: Optional[int] = Field(None, ge=1)


class TermOut(BaseModel):
    """A sized term, ready for the layout collaborator."""

    text: str
    size: float
    score: float


class WordCloudResponse(BaseModel):
    """Response for /api/wordcloud."""

    documents: int = 0
    terms: List[TermOut] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    status: str = "ok"
    documents_loaded: int = 0
