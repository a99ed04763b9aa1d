"""Custom exception hierarchy for the Lost London search engine."""


class LostLondonError(Exception):
    """Base exception for all search engine errors."""


class EmptyQueryError(LostLondonError):
    """The search query was missing or blank."""


class EmbeddingUnavailable(LostLondonError):
    """The embedding provider is not configured or failed to respond."""


class PassageStoreError(LostLondonError):
    """Error reading from the passage store."""


class GraphServiceError(LostLondonError):
    """Error talking to the knowledge-graph service."""


class ConfigurationError(LostLondonError):
    """Error in system configuration."""
