"""
API routes: health, document index, word cloud.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from src.relevance import (
    Document,
    RelevanceScorer,
    ScoredTerm,
    ScorerConfig,
    scale_terms,
)

from .models import (
    HealthResponse,
    IndexEntry,
    TermOut,
    WordCloudRequest,
    WordCloudResponse,
)

router = APIRouter(prefix="/api", tags=["api"])
site_router = APIRouter(tags=["site"])


def _get_state(request: Request) -> tuple[ScorerConfig, list[Document], list[ScoredTerm]]:
    config = getattr(request.app.state, "config", None) or ScorerConfig()
    documents = getattr(request.app.state, "documents", [])
    terms = getattr(request.app.state, "terms", [])
    return config, documents, terms


def _terms_out(terms: list[ScoredTerm]) -> list[TermOut]:
    return [TermOut(text=t.text, size=t.display_size, score=t.raw_score) for t in terms]


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Health check."""
    _, documents, _ = _get_state(request)
    return HealthResponse(status="ok", documents_loaded=len(documents))


@site_router.get("/wordcloud/index.json", response_model=list[IndexEntry])
async def wordcloud_index(request: Request) -> list[IndexEntry]:
    """Documents behind the site's word cloud."""
    _, documents, _ = _get_state(request)
    return [IndexEntry(link=d.id, text=d.text) for d in documents]


@router.get("/wordcloud", response_model=WordCloudResponse)
async def get_wordcloud(
    request: Request,
    top_k: int | None = Query(None, ge=1),
) -> WordCloudResponse:
    """Precomputed cloud for the loaded index; a smaller top_k re-scales the shorter list."""
    config, documents, terms = _get_state(request)
    if top_k is not None and top_k < len(terms):
        ranked = [(t.text, t.raw_score) for t in terms[:top_k]]
        terms = scale_terms(ranked, config.output_range)
    return WordCloudResponse(documents=len(documents), terms=_terms_out(terms))


@router.post("/wordcloud", response_model=WordCloudResponse)
async def post_wordcloud(request: Request, body: WordCloudRequest) -> WordCloudResponse:
    """Score the documents in the request body."""
    base, _, _ = _get_state(request)
    overrides: dict[str, Any] = {}
    if body.top_k is not None:
        overrides["top_k"] = body.top_k
    if body.min_term_length is not None:
        overrides["min_term_length"] = body.min_term_length
    if body.min_size is not None or body.max_size is not None:
        lo, hi = base.output_range
        overrides["output_range"] = (
            body.min_size if body.min_size is not None else lo,
            body.max_size if body.max_size is not None else hi,
        )
    try:
        config = replace(base, **overrides)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    documents = [Document(id=d.id, text=d.text) for d in body.documents]
    scorer = RelevanceScorer(config=config)
    terms = await asyncio.to_thread(scorer.score, documents)
    return WordCloudResponse(documents=len(documents), terms=_terms_out(terms))
