"""ExampleService — runs each idiom demonstration and reports a ServiceResult.

Every public method corresponds to one CLI example. Defaults reproduce the
classic demo data, so ``idiomctl all`` needs no arguments.
Domain errors are converted into ``ServiceError`` payloads; anything else
propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, NamedTuple

from idiomctl.domain import names
from idiomctl.domain.board import Board
from idiomctl.domain.enumeration import DEFAULT_NUMBERS, for_each
from idiomctl.domain.errors import IdiomError
from idiomctl.domain.garden import DEFAULT_GARDEN, GardenInventory
from idiomctl.domain.majors import Major, respond
from idiomctl.domain.moods import DEFAULT_FEELINGS, DEFAULT_NAME, report
from idiomctl.domain.names import DEFAULT_PEOPLE, PICASSO_FULL_NAME, PersonName
from idiomctl.services.result import ServiceError, ServiceResult
from idiomctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

DEFAULT_MAJOR = Major.BIOLOGY.value
DEFAULT_BOARD_SIZE = (2, 3)
DEFAULT_PLACEMENTS: tuple[tuple[int, int, Any], ...] = ((0, 0, 1), (1, 0, 1))
DEFAULT_BOARD_LOOKUPS: tuple[tuple[int, int], ...] = ((0, 0), (1, 0), (0, 1))
DEFAULT_GARDEN_LOOKUPS: tuple[str, ...] = ("roses", "tulips")


class ExampleInfo(NamedTuple):
    name: str
    description: str


EXAMPLES: tuple[ExampleInfo, ...] = (
    ExampleInfo("major", "Reply to a student's major with a bounded-choice dispatch."),
    ExampleInfo("enumerate", "Visit each number through a callback; nothing leaks."),
    ExampleInfo("mood", "Report any number of feelings via variadic arguments."),
    ExampleInfo("splitname", "Destructure a full name into first, middle, and last."),
    ExampleInfo("board", "Get and set board cells by (row, column)."),
    ExampleInfo("middlename", "Check for a middle name by presence, not truthiness."),
    ExampleInfo("garden", "Look up plant counts in a keyed inventory."),
)

EXAMPLE_NAMES: tuple[str, ...] = tuple(info.name for info in EXAMPLES)


def _shown(value: Any, missing: str) -> str:
    return missing if value is None else str(value)


class ExampleService:
    """Runs the idiom demonstrations."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _failure(op: str, exc: IdiomError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("Example %s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.code,
                message=str(exc),
                detail={"kind": type(exc).__name__},
            ),
        )

    # ------------------------------------------------------------------
    # list — the example catalogue
    # ------------------------------------------------------------------

    def list_examples(self) -> ServiceResult:
        """List every example with its one-line description."""
        items = [info._asdict() for info in EXAMPLES]
        return ServiceResult(ok=True, op="list", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Individual examples
    # ------------------------------------------------------------------

    @traced
    def major(self, major: str = DEFAULT_MAJOR) -> ServiceResult:
        """Reply to *major* with its canned response."""
        logger.debug("Responding to major %r", major)
        response = respond(major)
        return ServiceResult(
            ok=True,
            op="major",
            data={
                "major": major,
                "matched": major in {m.value for m in Major},
                "lines": [response],
            },
        )

    @traced
    def enumerate(self, numbers: Iterable[int] = DEFAULT_NUMBERS) -> ServiceResult:
        """Visit each of *numbers* in order, recording the visits."""
        visited: list[int] = []
        for_each(numbers, visited.append)
        logger.debug("Visited %d numbers", len(visited))
        return ServiceResult(
            ok=True,
            op="enumerate",
            data={"count": len(visited), "items": visited, "lines": [str(n) for n in visited]},
        )

    @traced
    def mood(
        self,
        name: str = DEFAULT_NAME,
        feelings: Sequence[str] = DEFAULT_FEELINGS,
    ) -> ServiceResult:
        """Report how *name* feels, one line per feeling."""
        lines = report(name, *feelings)
        return ServiceResult(
            ok=True,
            op="mood",
            data={"name": name, "count": len(lines), "lines": lines},
        )

    @traced
    def split_name(self, full_name: str = PICASSO_FULL_NAME) -> ServiceResult:
        """Split *full_name* into first, middle tokens, and last."""
        try:
            parts = names.split_name(full_name)
        except IdiomError as exc:
            return self._failure("splitname", exc)
        return ServiceResult(
            ok=True,
            op="splitname",
            data={
                "full_name": full_name,
                "first": parts.first,
                "middle": list(parts.middle),
                "middle_count": len(parts.middle),
                "last": parts.last,
                "lines": [
                    f"first: {parts.first}",
                    f"middle: {' '.join(parts.middle) or '(none)'}",
                    f"last: {parts.last}",
                ],
            },
        )

    @traced
    def board(
        self,
        *,
        height: int = DEFAULT_BOARD_SIZE[0],
        width: int = DEFAULT_BOARD_SIZE[1],
        placements: Sequence[tuple[int, int, Any]] = DEFAULT_PLACEMENTS,
        lookups: Sequence[tuple[int, int]] = DEFAULT_BOARD_LOOKUPS,
    ) -> ServiceResult:
        """Build a board, place pieces, then read back the *lookups* cells."""
        try:
            board = Board(height, width)
            with trace_span("place") as span:
                if span is not None:
                    span.annotate("cells", height * width)
                for row, column, piece in placements:
                    board.set(row, column, piece)
            with trace_span("lookup"):
                found = [
                    {"row": row, "column": column, "piece": board.get(row, column)}
                    for row, column in lookups
                ]
        except IdiomError as exc:
            return self._failure("board", exc)
        return ServiceResult(
            ok=True,
            op="board",
            data={
                "height": board.height,
                "width": board.width,
                "rows": [list(row) for row in board.rows()],
                "lookups": found,
                "lines": [
                    f"get({f['row']}, {f['column']}) => {_shown(f['piece'], 'empty')}"
                    for f in found
                ],
            },
        )

    @traced
    def middle_name(self, people: Sequence[PersonName] = DEFAULT_PEOPLE) -> ServiceResult:
        """Report whether each of *people* has a middle name."""
        items = [
            {
                "name": person.full_name,
                "first": person.first,
                "middle": person.middle,
                "last": person.last,
                "has_middle_name": person.has_middle_name(),
            }
            for person in people
        ]
        return ServiceResult(
            ok=True,
            op="middlename",
            data={
                "count": len(items),
                "items": items,
                "lines": [
                    f"{item['name']}: {'yes' if item['has_middle_name'] else 'no'}"
                    for item in items
                ],
            },
        )

    @traced
    def garden(
        self,
        entries: Iterable[tuple[str, int]] = DEFAULT_GARDEN,
        lookups: Sequence[str] = DEFAULT_GARDEN_LOOKUPS,
    ) -> ServiceResult:
        """Build an inventory from *entries* and look up each of *lookups*."""
        try:
            inventory = GardenInventory(entries)
        except IdiomError as exc:
            return self._failure("garden", exc)
        found = [{"name": name, "count": inventory.count_of(name)} for name in lookups]
        return ServiceResult(
            ok=True,
            op="garden",
            data={
                "count": len(inventory),
                "plants": [{"name": name, "count": count} for name, count in inventory.items()],
                "lookups": found,
                "lines": [f"{f['name']}: {_shown(f['count'], 'not planted')}" for f in found],
            },
        )

    # ------------------------------------------------------------------
    # all — every example with its defaults
    # ------------------------------------------------------------------

    def runners(self) -> dict[str, Callable[[], ServiceResult]]:
        """Map example name to a zero-argument runner, in catalogue order."""
        return {
            "major": self.major,
            "enumerate": self.enumerate,
            "mood": self.mood,
            "splitname": self.split_name,
            "board": self.board,
            "middlename": self.middle_name,
            "garden": self.garden,
        }

    def run_all(self) -> list[ServiceResult]:
        """Run every example in order, stopping after the first failure."""
        results: list[ServiceResult] = []
        for name, run in self.runners().items():
            logger.debug("Running example %s", name)
            result = run()
            results.append(result)
            if not result.ok:
                break
        return results
