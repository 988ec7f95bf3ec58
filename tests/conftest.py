"""Shared pytest fixtures and test helpers for seqtools tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner, Result

from seqtools.cli import cli
from seqtools.services.sequence import SequenceService
from seqtools.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> SequenceService:
    return SequenceService()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory so no stray seqtools.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SEQTOOLS_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    seq = logging.getLogger("seqtools")
    seq_level = seq.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    seq.setLevel(seq_level)
    disable_telemetry()
    structlog.contextvars.clear_contextvars()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def invoke_json(runner: CliRunner, *args: str) -> tuple[Result, dict[str, Any]]:
    """Invoke the CLI with --json and parse the emitted ServiceResult."""
    result = runner.invoke(cli, ["--json", *args])
    return result, json.loads(result.output)
