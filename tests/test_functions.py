from __future__ import annotations

from k8sgen.rendering.functions import FUNCTIONS, first_rune


def test_first_rune() -> None:
    assert first_rune("aws") == "a"


def test_first_rune_is_unicode_aware() -> None:
    assert first_rune("éu-west") == "é"
    assert first_rune("🚀x") == "🚀"


def test_first_rune_of_empty_string() -> None:
    assert first_rune("") == ""


def test_registry_exposes_both_spellings() -> None:
    assert FUNCTIONS["first_rune"] is first_rune
    assert FUNCTIONS["firstRune"] is first_rune


def test_first_rune_of_non_string() -> None:
    assert first_rune(8080) == "8"
    assert first_rune(None) == "N"
