"""Tests for the root seqtools CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from seqtools import __version__
from seqtools.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "seqtools" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/none.toml"], ["-t", "float"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_invalid_type_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--type", "complex", "sort", "1"])
    assert result.exit_code == 2


# --- Command registration ---

EXPECTED_COMMANDS = [
    "map",
    "filter",
    "flat-map",
    "sort",
    "reverse",
    "pipeline",
    "foldl",
    "foldr",
    "zip",
    "enumerate",
    "iterate",
    "deconstruct",
    "divmod",
    "all-of",
    "one-of",
    "none-of",
    "range-filter",
]


def test_all_commands_registered() -> None:
    assert list(cli.commands) == EXPECTED_COMMANDS


def test_help_lists_commands_in_definition_order(cli_runner: CliRunner) -> None:
    output = cli_runner.invoke(cli, ["--help"]).output
    positions = [output.index(f"  {name} ") for name in ("map", "foldl", "range-filter")]
    assert positions == sorted(positions)


# --- Configuration ---


class TestConfigFile:
    def test_discovered_separator(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "seqtools.toml").write_text('[parse]\nseparator = ";"\n')
        result = cli_runner.invoke(cli, ["--json", "foldl", "add", "1;2;3"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["result"] == 6

    def test_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "alt.toml"
        config.write_text('[parse]\nelement_type = "str"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "sort", "b,a"])
        assert json.loads(result.output)["data"]["result"] == ["a", "b"]

    def test_type_flag_beats_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "seqtools.toml").write_text('[parse]\nelement_type = "str"\n')
        result = cli_runner.invoke(cli, ["--json", "--type", "int", "sort", "10,9"])
        assert json.loads(result.output)["data"]["result"] == [9, 10]

    def test_env_separator(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEQTOOLS_PARSE__SEPARATOR", " ")
        result = cli_runner.invoke(cli, ["-q", "reverse", "1 2 3"])
        assert result.output.strip() == "[3, 2, 1]"

    def test_invalid_toml_reports_cleanly(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "seqtools.toml").write_text("[parse\n")
        result = cli_runner.invoke(cli, ["sort", "1"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output


# --- Verbose telemetry ---


def test_verbose_shows_timing(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "map", "inc", "1"])
    assert result.exit_code == 0
    assert "meta:" in result.stdout
    assert "SequenceService.map" in result.stdout


def test_verbose_json_includes_telemetry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--json", "map", "inc", "1"])
    parsed = json.loads(result.stdout)
    assert parsed["meta"]["telemetry"]["name"] == "SequenceService.map"


def test_log_json_lines_carry_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "map", "inc", "1"])
    assert result.exit_code == 0
    events = [json.loads(line) for line in result.stderr.splitlines()]
    assert events
    assert {event["command"] for event in events} == {"map"}
    assert "service.timed" in [event["event"] for event in events]
