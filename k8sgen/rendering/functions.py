"""Functions available to templates."""

from __future__ import annotations

from typing import Any, Callable


def first_rune(value: Any) -> str:
    """Return the first character of ``str(value)``, or an empty string."""
    return str(value)[:1]


FUNCTIONS: dict[str, Callable[..., Any]] = {
    "first_rune": first_rune,
    "firstRune": first_rune,
}
