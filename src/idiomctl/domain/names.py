"""Name handling — splitting full names and checking for a middle name.

Two idioms live here:

- Splat-style destructuring: ``first, *middle, last = tokens``.
- Presence checks: a middle name is "there" when it is not ``None``.
  An empty string still counts as present; truthiness is never consulted.
"""

from __future__ import annotations

from pydantic import BaseModel

from idiomctl.domain.errors import InvalidInputError

PICASSO_FULL_NAME = (
    "Pablo Diego José Francisco de Paula Juan Nepomuceno Crispín Crispiniano "
    "María Remedios de la Santísima Trinidad Ruiz Picasso"
)


class SplitName(BaseModel):
    """A full name broken into first, middle tokens, and last."""

    model_config = {"frozen": True}

    first: str
    middle: tuple[str, ...] = ()
    last: str


def split_name(full_name: str) -> SplitName:
    """Split *full_name* on whitespace into first / middle / last.

    Raises:
        InvalidInputError: Fewer than two tokens (no first/last split).
    """
    tokens = full_name.split()
    if len(tokens) < 2:
        msg = f"Full name needs at least two parts, got {len(tokens)}: {full_name!r}"
        raise InvalidInputError(msg)
    first, *middle, last = tokens
    return SplitName(first=first, middle=tuple(middle), last=last)


class PersonName(BaseModel):
    """Immutable first / middle / last name value."""

    model_config = {"frozen": True}

    first: str
    last: str
    middle: str | None = None

    def __init__(self, first: str, last: str, middle: str | None = None) -> None:
        super().__init__(first=first, last=last, middle=middle)

    def has_middle_name(self) -> bool:
        """True iff a middle name was given, even an empty one."""
        return self.middle is not None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first, self.middle, self.last) if part)

    def __str__(self) -> str:
        return self.full_name


DEFAULT_PEOPLE: tuple[PersonName, ...] = (
    PersonName("George", "Washington"),
    PersonName("Barack", "Obama", "Hussein"),
)
