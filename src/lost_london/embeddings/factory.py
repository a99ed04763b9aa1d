"""Build the configured embedding provider."""

from __future__ import annotations

from lost_london.config.settings import Settings
from lost_london.embeddings.openai_embedder import OpenAIEmbedder
from lost_london.embeddings.voyage_embedder import VoyageEmbedder
from lost_london.exceptions import ConfigurationError
from lost_london.protocols.embedder import Embedder


def create_embedder(settings: Settings) -> Embedder:
    if settings.embedding_provider == "openai":
        return OpenAIEmbedder(
            api_key=settings.openai_api_key,
            model=settings.embedding_model,
            dimensions=settings.embedding_dimensions,
            timeout=settings.embedding_timeout_seconds,
        )
    if settings.embedding_provider == "voyage":
        return VoyageEmbedder(
            api_key=settings.voyage_api_key,
            model=settings.embedding_model,
            dimensions=settings.embedding_dimensions,
            base_url=settings.voyage_base_url,
            timeout=settings.embedding_timeout_seconds,
        )
    raise ConfigurationError(f"Unknown embedding provider: {settings.embedding_provider}")
