"""Example-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from idiomctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from idiomctl.services.result import ServiceResult

EMPTY_CELL = "."


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    lines = result.data.get("lines")
    if lines:
        return "\n".join(str(line) for line in lines)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_name(item) for item in items if _extract_name(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_name(item: Any) -> str:
    if isinstance(item, dict):
        val = item.get("name")
        return "" if val is None else str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="idiom.ok")
    op = Text(f"  {result.op}", style="idiom.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="idiom.key"), Text(str(value)), sep="")


def _line(console: Console, text: str) -> None:
    """Print a plain indented line; user text is never parsed as markup."""
    console.print(Text(f"  {text}"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    line = f"{prefix}{duration:>8.2f}ms  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line += f"  ({extras})"
    console.print(Text(line, style="dim"))

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="idiom.error")
    op = Text(f"  {result.op}", style="idiom.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}", style="dim"))


# ── Line-oriented examples (major, enumerate, mood) ──────────────────


def _render_lines(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for line in result.data.get("lines", []):
        _line(console, str(line))


# ── splitname ─────────────────────────────────────────────────────────


def _render_split_name(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "first", d.get("first", ""))
    middle = d.get("middle", [])
    _field(console, "middle", " ".join(middle) if middle else "(none)")
    _field(console, "middle_count", d.get("middle_count", len(middle)))
    _field(console, "last", d.get("last", ""))


# ── board ─────────────────────────────────────────────────────────────


def _cell(piece: Any) -> Text:
    if piece is None:
        return Text(EMPTY_CELL, style="idiom.empty")
    return Text(str(piece), style="idiom.piece")


def _render_board(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "size", f"{d.get('height')}x{d.get('width')}")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", style="idiom.key", justify="right")
    for column in range(d.get("width", 0)):
        table.add_column(str(column), justify="center")
    for index, row in enumerate(d.get("rows", [])):
        table.add_row(str(index), *(_cell(piece) for piece in row))
    console.print(table)

    for line in d.get("lines", []):
        _line(console, str(line))


# ── middlename ────────────────────────────────────────────────────────


def _render_middle_name(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        name = Text(f"  {item.get('name', '')}: ")
        if item.get("has_middle_name"):
            verdict = Text(f"has a middle name ({item.get('middle')!r})", style="idiom.yes")
        else:
            verdict = Text("has no middle name", style="idiom.no")
        console.print(name, verdict, sep="")


# ── garden ────────────────────────────────────────────────────────────


def _render_garden(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Plant")
    table.add_column("Count", justify="right")
    for plant in d.get("plants", []):
        table.add_row(str(plant["name"]), str(plant["count"]))
    console.print(table)

    for line in d.get("lines", []):
        _line(console, str(line))


# ── list ──────────────────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Example", style="idiom.op", no_wrap=True)
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(str(item.get("name", "")), str(item.get("description", "")))
    console.print(table)


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)


_OP_RENDERERS = {
    "major": _render_lines,
    "enumerate": _render_lines,
    "mood": _render_lines,
    "splitname": _render_split_name,
    "board": _render_board,
    "middlename": _render_middle_name,
    "garden": _render_garden,
    "list": _render_list,
}
