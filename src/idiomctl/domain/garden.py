"""Keyed inventory — plant name to count, built once from literal pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from idiomctl.domain.errors import DuplicateKeyError, InvalidInputError

DEFAULT_GARDEN: tuple[tuple[str, int], ...] = (
    ("roses", 9),
    ("daisies", 12),
    ("sunflowers", 4),
    ("lilies", 6),
    ("marigolds", 15),
    ("orchids", 2),
)


class GardenInventory:
    """Read-only, insertion-ordered mapping of plant name to count.

    Raises:
        DuplicateKeyError: A plant name appears twice in *entries*.
        InvalidInputError: A count is negative.
    """

    def __init__(self, entries: Iterable[tuple[str, int]]) -> None:
        counts: dict[str, int] = {}
        for name, count in entries:
            if name in counts:
                msg = f"Plant {name!r} listed more than once"
                raise DuplicateKeyError(msg)
            if count < 0:
                msg = f"Count for {name!r} must be non-negative, got {count}"
                raise InvalidInputError(msg)
            counts[name] = count
        self._counts = counts

    def count_of(self, name: str) -> int | None:
        """Return the count for *name*, or None if it is not planted."""
        return self._counts.get(name)

    def names(self) -> list[str]:
        return list(self._counts)

    def items(self) -> list[tuple[str, int]]:
        return list(self._counts.items())

    def __contains__(self, name: object) -> bool:
        return name in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)
