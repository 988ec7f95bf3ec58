"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from seqtools.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["map", "--help"], ["TRANSFORM", "VALUES", "square"]),
    (["filter", "--help"], ["PREDICATE", "even"]),
    (["flat-map", "--help"], ["EXPANDER", "range3"]),
    (["sort", "--help"], ["--desc"]),
    (["reverse", "--help"], ["VALUES"]),
    (["pipeline", "--help"], ["--stage", "composition"]),
    (["foldl", "--help"], ["OP", "--init", "add"]),
    (["foldr", "--help"], ["OP", "--init"]),
    (["zip", "--help"], ["SEQUENCES", "shortest"]),
    (["enumerate", "--help"], ["--sorted"]),
    (["iterate", "--help"], ["INIT", "TRANSFORM", "COUNT"]),
    (["deconstruct", "--help"], ["SIZE", "VALUES"]),
    (["divmod", "--help"], ["X", "D"]),
    (["all-of", "--help"], ["truthy"]),
    (["one-of", "--help"], ["at least one"]),
    (["none-of", "--help"], ["falsy"]),
    (["range-filter", "--help"], ["LOWER", "UPPER", "half-open"]),
]


def _help_id(args_keywords: tuple[list[str], list[str]]) -> str:
    args, _ = args_keywords
    return "_".join(a for a in args if a != "--help")


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_help_id(item) for item in HELP_COMMANDS],
)
def test_command_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"
