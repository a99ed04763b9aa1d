"""Search endpoints."""

from __future__ import annotations

import asyncio
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lost_london.api.dependencies import get_search_pipeline, get_settings
from lost_london.config.settings import Settings
from lost_london.exceptions import (
    EmbeddingUnavailable,
    EmptyQueryError,
    LostLondonError,
)
from lost_london.models.schemas import SearchRequest, SearchResponse
from lost_london.observability.logger import get_logger
from lost_london.pipeline.search_pipeline import HybridSearchPipeline

logger = get_logger("routes_search")

router = APIRouter()


async def _run(
    request: SearchRequest,
    pipeline: HybridSearchPipeline,
    settings: Settings,
) -> SearchResponse:
    try:
        return await asyncio.wait_for(
            pipeline.execute(request), timeout=settings.search_timeout_seconds
        )
    except EmptyQueryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmbeddingUnavailable as e:
        logger.error("embedding_unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Search infrastructure unavailable: {e}",
        )
    except asyncio.TimeoutError:
        logger.error("search_timeout", timeout_s=settings.search_timeout_seconds)
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail="Search timed out")
    except LostLondonError as e:
        logger.error("search_failed", error=str(e), error_type=type(e).__name__)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    pipeline: HybridSearchPipeline = Depends(get_search_pipeline),
    settings: Settings = Depends(get_settings),
) -> SearchResponse:
    return await _run(request, pipeline, settings)


@router.get("/search", response_model=SearchResponse)
async def search_get(
    q: str | None = Query(default=None),
    query: str | None = Query(default=None),
    limit: int = Query(default=10, gt=0, le=50),
    corpora: Literal["primary_only", "both"] = Query(default="both"),
    pipeline: HybridSearchPipeline = Depends(get_search_pipeline),
    settings: Settings = Depends(get_settings),
) -> SearchResponse:
    request = SearchRequest(query=q or query, limit=limit, corpora=corpora)
    return await _run(request, pipeline, settings)
