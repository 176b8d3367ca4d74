"""Block iteration — visit each element without leaking the loop variable.

A module-level ``for`` loop leaves its target bound afterwards. Handing the
per-element work to a callback keeps the element confined to the
traversal: the only name ever bound is local to :func:`for_each`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

_T = TypeVar("_T")

DEFAULT_NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5)


def for_each(sequence: Iterable[_T], visit: Callable[[_T], object]) -> None:
    """Call *visit* once per element of *sequence*, in order.

    The traversal is a single pass over ``iter(sequence)``: a generator or
    other one-shot iterator is consumed and cannot be replayed.
    """
    for element in iter(sequence):
        visit(element)
