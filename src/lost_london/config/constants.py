"""Shared correction and expansion tables consumed by every search entry point."""

from __future__ import annotations

# Misheard fragment -> canonical fragment. Applied in order as whole-word
# replacements; a key that contains another key must come first.
PHONETIC_CORRECTIONS: dict[str, str] = {
    # Thorney
    "fauny island": "thorney island",
    "fawny island": "thorney island",
    "thorny island": "thorney island",
    "fauny": "thorney",
    "fawny": "thorney",
    "fawney": "thorney",
    "forney": "thorney",
    "fourney": "thorney",
    "thorny": "thorney",
    "thorn-ee": "thorney",
    # Tyburn
    "tie burn": "tyburn",
    "tieburn": "tyburn",
    "ty burn": "tyburn",
    # Devil's Acre
    "the devils acre": "devil's acre",
    "devils acre": "devil's acre",
    "devil acre": "devil's acre",
    # Westminster and Whitehall
    "west minster": "westminster",
    "westmister": "westminster",
    "white hall": "whitehall",
    "parliment": "parliament",
    "tems": "thames",
    # People
    "shake spear": "shakespeare",
    "shakespear": "shakespeare",
    "shakespere": "shakespeare",
    "shakspeare": "shakespeare",
    "william caxton": "caxton",
    "ignacio": "ignatius",
    "ignasio": "ignatius",
    "ignacius": "ignatius",
    # Buildings
    "aquarim": "aquarium",
    "aquariam": "aquarium",
    "royale": "royal",
    "cristal": "crystal",
    "crystle": "crystal",
    # Periods
    "elizabethian": "elizabethan",
    "elizabethen": "elizabethan",
    "victorien": "victorian",
    "mediaeval": "medieval",
    "medival": "medieval",
}

# Topic -> fallback search terms. First topic contained in the query wins.
TOPIC_EXPANSIONS: dict[str, list[str]] = {
    "tudor": ["tudor", "henry viii", "henry vii", "16th century", "reformation"],
    "dickensian": ["dickens", "victorian", "oliver twist", "19th century"],
    "dickens": ["dickens", "victorian", "oliver twist"],
    "medieval": ["medieval", "monastery", "monks", "middle ages"],
    "roman": ["roman", "londinium", "amphitheatre", "baths"],
    "victorian": ["victorian", "19th century", "crystal palace", "railway"],
    "shakespeare": ["shakespeare", "globe", "curtain theatre", "blackfriars"],
    "rivers": ["tyburn", "fleet", "walbrook", "hidden rivers", "underground"],
    "east end": ["east end", "whitechapel", "spitalfields", "stepney"],
}

# Entity label the graph service uses for untyped nodes.
GENERIC_ENTITY_KIND = "Entity"

ENTITY_SUMMARY_MAX_CHARS = 150
MAX_FACTS_PER_PASSAGE = 3
MAX_SUGGESTED_TOPICS = 3
