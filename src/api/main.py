"""
FastAPI application serving the word cloud.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .deps import build_cloud_state
from .routes import router, site_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the document index and score it on startup; clear on shutdown."""
    config, documents, terms = build_cloud_state()
    app.state.config = config
    app.state.documents = documents
    app.state.terms = terms
    yield
    app.state.terms = []


app = FastAPI(
    title="Word Cloud API",
    description="TF-IDF term relevance for word-cloud summaries",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
app.include_router(router)
app.include_router(site_router)
