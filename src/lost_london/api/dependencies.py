"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from lost_london.config.settings import Settings
from lost_london.pipeline.search_pipeline import HybridSearchPipeline
from lost_london.storage.passage_store import LocalPassageStore


def get_search_pipeline(request: Request) -> HybridSearchPipeline:
    return request.app.state.search_pipeline


def get_passage_store(request: Request) -> LocalPassageStore:
    return request.app.state.passage_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
