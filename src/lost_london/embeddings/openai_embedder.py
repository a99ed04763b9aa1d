"""OpenAI embedding provider for query vectors."""

from __future__ import annotations

from openai import AsyncOpenAI

from lost_london.exceptions import EmbeddingUnavailable
from lost_london.observability.logger import get_logger

logger = get_logger("embeddings.openai")


class OpenAIEmbedder:
    def __init__(
        self,
        api_key: str,
        model: str = "text-embedding-3-small",
        dimensions: int = 1536,
        timeout: float = 15.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._dimensions = dimensions
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout) if api_key else None

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def embed(self, text: str) -> list[float]:
        if self._client is None:
            raise EmbeddingUnavailable("OpenAI API key not configured")
        try:
            response = await self._client.embeddings.create(input=[text], model=self._model)
            embedding = response.data[0].embedding
        except Exception as e:
            raise EmbeddingUnavailable(f"Failed to embed query: {e}") from e
        logger.debug("embedded_query", model=self._model, query_len=len(text))
        return embedding
