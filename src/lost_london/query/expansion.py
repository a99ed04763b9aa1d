"""Topic-family expansion used as the fallback term list."""

from __future__ import annotations

from lost_london.config.constants import TOPIC_EXPANSIONS


class TopicExpander:
    def __init__(self, expansions: dict[str, list[str]] | None = None) -> None:
        self._expansions = dict(
            TOPIC_EXPANSIONS if expansions is None else expansions
        )

    def expand(self, normalized: str) -> list[str]:
        """Return the first matching topic's terms, else ``[normalized]``."""
        for topic, terms in self._expansions.items():
            if topic in normalized and terms:
                return list(terms)
        return [normalized]
