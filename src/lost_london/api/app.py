"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from lost_london.api.middleware import RequestTimingMiddleware
from lost_london.api.routes_health import router as health_router
from lost_london.api.routes_search import router as search_router
from lost_london.assembly.assembler import ResultAssembler
from lost_london.config.settings import Settings
from lost_london.embeddings.factory import create_embedder
from lost_london.enrichment.graph_matcher import GraphEnrichmentMatcher
from lost_london.graph.zep_client import ZepGraphClient
from lost_london.observability.logger import get_logger, setup_logging
from lost_london.pipeline.search_pipeline import HybridSearchPipeline
from lost_london.protocols.embedder import Embedder
from lost_london.protocols.graph import GraphClient
from lost_london.protocols.passage_store import PassageStore
from lost_london.retrieval.fusion import FusionEngine
from lost_london.retrieval.merger import CrossCorpusMerger
from lost_london.storage.passage_store import LocalPassageStore
from lost_london.storage.sqlite_passage_store import SQLitePassageStore
from lost_london.vectorstore.faiss_store import FAISSVectorStore

logger = get_logger("app")


def build_pipeline(
    settings: Settings,
    store: PassageStore,
    embedder: Embedder,
    graph_client: GraphClient,
) -> HybridSearchPipeline:
    return HybridSearchPipeline(
        fusion_engine=FusionEngine(store=store, embedder=embedder, settings=settings),
        merger=CrossCorpusMerger(
            primary_run=settings.interleave_primary,
            secondary_run=settings.interleave_secondary,
        ),
        graph_matcher=GraphEnrichmentMatcher(
            client=graph_client,
            node_limit=settings.graph_node_limit,
            edge_limit=settings.graph_edge_limit,
        ),
        assembler=ResultAssembler.from_settings(settings),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    setup_logging(settings.log_level)

    Path(settings.sqlite_db_path).parent.mkdir(parents=True, exist_ok=True)

    # Storage
    sqlite_store = SQLitePassageStore(settings.sqlite_db_path)
    await sqlite_store.initialize()
    vector_store = FAISSVectorStore(
        dimensions=settings.embedding_dimensions,
        index_path=settings.faiss_index_path,
    )
    passage_store = LocalPassageStore(sqlite_store, vector_store)

    # Collaborators
    embedder = create_embedder(settings)
    graph_client = ZepGraphClient(
        api_key=settings.zep_api_key,
        graph_id=settings.graph_id,
        base_url=settings.zep_base_url,
        timeout=settings.graph_timeout_seconds,
    )

    app.state.search_pipeline = build_pipeline(settings, passage_store, embedder, graph_client)
    app.state.passage_store = passage_store
    app.state.embedder = embedder
    app.state.graph_client = graph_client
    app.state.settings = settings

    logger.info(
        "startup_complete",
        passages=await passage_store.counts(),
        index_sizes=passage_store.index_sizes,
        embedding_configured=embedder.configured,
        graph_configured=graph_client.configured,
    )

    yield

    await graph_client.aclose()
    aclose = getattr(embedder, "aclose", None)
    if aclose is not None:
        await aclose()
    logger.info("shutdown_complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Lost London Search",
        version="1.0.0",
        description="Hybrid retrieval and knowledge-graph enrichment over Lost London articles",
        lifespan=lifespan,
    )
    app.add_middleware(RequestTimingMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(search_router, tags=["search"])
    return app
