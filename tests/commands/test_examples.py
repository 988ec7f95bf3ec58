"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from seqtools.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["map", "--examples"], ["seqtools map square"]),
    (["filter", "--examples"], ["seqtools filter even"]),
    (["flat-map", "--examples"], ["range3"]),
    (["sort", "--examples"], ["--desc"]),
    (["reverse", "--examples"], ["seqtools reverse"]),
    (["pipeline", "--examples"], ["-f inc -f square"]),
    (["foldl", "--examples"], ["--init 10"]),
    (["foldr", "--examples"], ["seqtools foldr sub"]),
    (["zip", "--examples"], ["seqtools zip"]),
    (["enumerate", "--examples"], ["seqtools enumerate"]),
    (["iterate", "--examples"], ["double 5"]),
    (["deconstruct", "--examples"], ["deconstruct 3"]),
    (["divmod", "--examples"], ["divmod 7 2"]),
    (["all-of", "--examples"], ["seqtools all-of"]),
    (["one-of", "--examples"], ["seqtools one-of"]),
    (["none-of", "--examples"], ["seqtools none-of"]),
    (["range-filter", "--examples"], ["range-filter 1 4"]),
]


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output


def test_examples_skips_required_arguments(cli_runner: CliRunner) -> None:
    """--examples is eager, so missing positional arguments are not an error."""
    result = cli_runner.invoke(cli, ["foldl", "--examples"])
    assert result.exit_code == 0
