"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from idiomctl.services.examples import ExampleService
from idiomctl.services.result import ServiceResult
from idiomctl.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("cells", 6)
        span.end()
        assert span.to_dict()["annotations"] == {"cells": 6}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("child") as span:
            assert span is None

    def test_enabled_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("child") as span:
            assert span is None


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_telemetry(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            with trace_span("inner") as span:
                assert span is not None
                span.annotate("rows", 2)
            return ServiceResult(ok=True, op="op", meta={"kept": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["kept"] == 1
        telemetry = result.meta["telemetry"]
        assert telemetry["children"][0]["name"] == "inner"
        assert telemetry["children"][0]["annotations"] == {"rows": 2}

    def test_exception_propagates(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            op()
        assert _current_span.get() is None

    def test_board_records_child_spans(self) -> None:
        enable_telemetry()
        result = ExampleService().board()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "ExampleService.board"
        assert [c["name"] for c in tree["children"]] == ["place", "lookup"]
        assert tree["children"][0]["annotations"] == {"cells": 6}
