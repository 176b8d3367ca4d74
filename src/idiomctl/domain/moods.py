"""Variadic arguments — one name, any number of feelings."""

from __future__ import annotations

DEFAULT_NAME = "Suzie"
DEFAULT_FEELINGS: tuple[str, ...] = ("happy", "excited", "nervous")


def report(name: str, *feelings: str) -> list[str]:
    """Return one ``"<name> is feeling <feeling> today."`` line per feeling.

    Examples:
        >>> report("Suzie", "happy")
        ['Suzie is feeling happy today.']
        >>> report("Suzie")
        []
    """
    return [f"{name} is feeling {feeling} today." for feeling in feelings]
