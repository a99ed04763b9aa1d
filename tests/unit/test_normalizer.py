"""Tests for phonetic query normalization."""

import pytest

from lost_london.config.constants import PHONETIC_CORRECTIONS
from lost_london.query.normalizer import QueryNormalizer


@pytest.fixture
def normalizer():
    return QueryNormalizer()


def test_lowercases_and_trims(normalizer):
    assert normalizer.normalize("  Westminster Abbey  ") == "westminster abbey"


def test_collapses_internal_whitespace(normalizer):
    assert normalizer.normalize("westminster\t  abbey") == "westminster abbey"


def test_exact_match_returns_mapped_value(normalizer):
    assert normalizer.normalize("Fauny Island") == "thorney island"


def test_exact_match_takes_precedence_over_substring_rules():
    table = {"fauny": "thorney", "fauny island": "the island of thorns"}
    normalizer = QueryNormalizer(table)
    # Substring rules alone would give "thorney island".
    assert normalizer.normalize("fauny island") == "the island of thorns"


def test_substring_correction_inside_longer_query(normalizer):
    assert normalizer.normalize("tell me about tie burn river") == "tell me about tyburn river"


def test_whole_word_only(normalizer):
    # "tems" must not fire inside "items", nor "thorny" inside "thornycroft".
    assert normalizer.normalize("items by thornycroft") == "items by thornycroft"


def test_apostrophe_keys(normalizer):
    assert normalizer.normalize("the devils acre slum") == "devil's acre slum"
    assert normalizer.normalize("devil acre") == "devil's acre"


def test_rules_apply_sequentially():
    table = {"tie burn": "ty burn", "ty burn": "tyburn"}
    assert QueryNormalizer(table).normalize("the tie burn") == "the tyburn"


def test_no_match_returns_cleaned_query(normalizer):
    assert normalizer.normalize("Roman Baths") == "roman baths"


def test_empty_input(normalizer):
    assert normalizer.normalize("") == ""
    assert normalizer.normalize("   ") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "fauny island",
        "Fauny Island history",
        "the devils acre",
        "shake spear at the globe",
        "william caxton's press",
        "west minster and white hall",
        "mediaeval tems crossings",
        "thorn-ee",
        "nothing to fix here",
    ],
)
def test_idempotent(normalizer, raw):
    once = normalizer.normalize(raw)
    assert normalizer.normalize(once) == once


def test_table_outputs_do_not_retrigger_rules(normalizer):
    for canonical in set(PHONETIC_CORRECTIONS.values()):
        assert normalizer.normalize(canonical) == canonical
