"""Phonetic and lexical repair of voice-transcribed queries."""

from __future__ import annotations

import re
import unicodedata

from lost_london.config.constants import PHONETIC_CORRECTIONS
from lost_london.observability.logger import get_logger

logger = get_logger("query_normalizer")


class QueryNormalizer:
    """Rewrites misheard fragments to their canonical spelling.

    An exact match of the whole query against the table wins outright.
    Otherwise every entry is applied in table order as a whole-word
    replacement, each rule seeing the output of the previous ones.
    """

    def __init__(self, corrections: dict[str, str] | None = None) -> None:
        self._corrections = dict(
            PHONETIC_CORRECTIONS if corrections is None else corrections
        )
        # Lookarounds instead of \b so keys ending in punctuation still anchor.
        self._patterns = [
            (re.compile(rf"(?<!\w){re.escape(wrong)}(?!\w)"), right)
            for wrong, right in self._corrections.items()
        ]

    def normalize(self, raw: str) -> str:
        text = self._clean(raw)

        exact = self._corrections.get(text)
        if exact is not None:
            return exact

        corrected = text
        for pattern, replacement in self._patterns:
            corrected = pattern.sub(lambda _m, r=replacement: r, corrected)

        if corrected != text:
            logger.debug("query_corrected", original=text, corrected=corrected)
        return corrected

    @staticmethod
    def _clean(text: str) -> str:
        text = unicodedata.normalize("NFKC", text or "")
        text = re.sub(r"\s+", " ", text).strip()
        return text.lower()
