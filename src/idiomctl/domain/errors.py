"""Domain error kinds.

Every error carries a stable ``code`` that the service layer copies into
``ServiceError.code``, and subclasses the closest builtin exception.
"""

from __future__ import annotations

from typing import ClassVar


class IdiomError(Exception):
    """Base class for failures raised by the idiom demonstrations."""

    code: ClassVar[str] = "IDIOM_ERROR"


class InvalidInputError(IdiomError, ValueError):
    """Malformed argument, e.g. a full name with fewer than two tokens."""

    code: ClassVar[str] = "INVALID_INPUT"


class OutOfBoundsError(IdiomError, IndexError):
    """Board coordinate outside the grid extents."""

    code: ClassVar[str] = "OUT_OF_BOUNDS"


class DuplicateKeyError(IdiomError, KeyError):
    """Repeated key while building an inventory."""

    code: ClassVar[str] = "DUPLICATE_KEY"

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
