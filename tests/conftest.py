"""Shared pytest fixtures for idiomctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from idiomctl.services.examples import ExampleService
from idiomctl.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> ExampleService:
    """A fresh ExampleService."""
    return ExampleService()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-logger and telemetry changes AppContext makes."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    idiom = logging.getLogger("idiomctl")
    idiom_level = idiom.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    idiom.setLevel(idiom_level)
    disable_telemetry()
