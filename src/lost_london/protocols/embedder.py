"""Protocol for embedding providers."""

from __future__ import annotations

from typing import Protocol


class Embedder(Protocol):
    async def embed(self, text: str) -> list[float]:
        """Raises EmbeddingUnavailable when unconfigured or on provider failure."""
        ...

    @property
    def dimensions(self) -> int: ...

    @property
    def configured(self) -> bool: ...
