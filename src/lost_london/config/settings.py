"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API Keys
    openai_api_key: str = ""
    voyage_api_key: str = ""
    zep_api_key: str = ""

    # Embedding
    embedding_provider: Literal["openai", "voyage"] = "openai"
    embedding_model: str = "text-embedding-3-small"
    embedding_dimensions: int = 1536
    embedding_timeout_seconds: float = 15.0
    voyage_base_url: str = "https://api.voyageai.com/v1"

    # Knowledge graph (Zep)
    zep_base_url: str = "https://api.getzep.com/api/v2"
    graph_id: str = "lost-london"
    graph_node_limit: int = 5
    graph_edge_limit: int = 10
    graph_timeout_seconds: float = 8.0

    # Fusion weights and keyword tiers (empirical, open to tuning)
    vector_top_k: int = 50
    vector_weight: float = 0.6
    keyword_weight: float = 0.4
    tier_content_phrase: float = 0.30
    tier_title_phrase: float = 0.25
    tier_title_token: float = 0.10
    tier_content_token: float = 0.05

    # Type boosts
    series_title_pattern: str = r"^vic keegan.*lost london"
    series_boost: float = 0.10
    primary_corpus_boost: float = 0.05

    # Cross-corpus interleave (primary:secondary)
    interleave_primary: int = 2
    interleave_secondary: int = 1

    # Result assembly
    content_window: int = 1500
    excerpt_window: int = 400
    ellipsis: str = "..."
    default_author: str = "Vic Keegan"

    # Storage paths
    sqlite_db_path: str = "data/lost_london.db"
    faiss_index_path: str = "data/faiss_index"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    search_timeout_seconds: float = 20.0
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "LOST_LONDON_"}
