"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from lost_london.api.dependencies import get_passage_store
from lost_london.models.schemas import HealthResponse
from lost_london.storage.passage_store import LocalPassageStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    request: Request,
    store: LocalPassageStore = Depends(get_passage_store),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        passage_counts=await store.counts(),
        index_sizes=store.index_sizes,
        embedding_configured=request.app.state.embedder.configured,
        graph_configured=request.app.state.graph_client.configured,
    )
