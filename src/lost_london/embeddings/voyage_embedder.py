"""Voyage AI embedding provider over the REST API."""

from __future__ import annotations

import httpx

from lost_london.exceptions import EmbeddingUnavailable
from lost_london.observability.logger import get_logger

logger = get_logger("embeddings.voyage")

EMBEDDINGS_ENDPOINT = "/embeddings"


class VoyageEmbedder:
    def __init__(
        self,
        api_key: str,
        model: str = "voyage-2",
        dimensions: int = 1024,
        base_url: str = "https://api.voyageai.com/v1",
        timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._dimensions = dimensions
        self._url = base_url.rstrip("/") + EMBEDDINGS_ENDPOINT
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def embed(self, text: str) -> list[float]:
        if not self._api_key:
            raise EmbeddingUnavailable("VOYAGE_API_KEY not configured")

        try:
            response = await self._client.post(
                self._url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                json={"input": [text], "model": self._model},
            )
        except httpx.HTTPError as e:
            raise EmbeddingUnavailable(f"Voyage request failed: {e}") from e

        if response.status_code != 200:
            raise EmbeddingUnavailable(
                f"Voyage API error: {response.status_code} {response.text[:200]}"
            )

        try:
            embedding = response.json()["data"][0]["embedding"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise EmbeddingUnavailable(f"Malformed Voyage response: {e}") from e

        logger.debug("embedded_query", model=self._model, query_len=len(text))
        return [float(x) for x in embedding]

    async def aclose(self) -> None:
        await self._client.aclose()
