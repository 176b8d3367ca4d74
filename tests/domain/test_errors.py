"""Tests for domain error kinds."""

from __future__ import annotations

import pytest

from idiomctl.domain.errors import (
    DuplicateKeyError,
    IdiomError,
    InvalidInputError,
    OutOfBoundsError,
)


@pytest.mark.parametrize(
    "error_cls, code, builtin",
    [
        (InvalidInputError, "INVALID_INPUT", ValueError),
        (OutOfBoundsError, "OUT_OF_BOUNDS", IndexError),
        (DuplicateKeyError, "DUPLICATE_KEY", KeyError),
    ],
)
def test_error_kinds(error_cls: type[IdiomError], code: str, builtin: type[Exception]) -> None:
    err = error_cls("boom")
    assert isinstance(err, IdiomError)
    assert isinstance(err, builtin)
    assert err.code == code
    assert str(err) == "boom"
