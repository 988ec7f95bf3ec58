"""Tests for map, filter, flat-map, sort, reverse and pipeline commands."""

from __future__ import annotations

import math

from click.testing import CliRunner

from seqtools.cli import cli
from tests.conftest import invoke_json


class TestMapCommand:
    def test_map(self, cli_runner: CliRunner) -> None:
        result, data = invoke_json(cli_runner, "map", "square", "1,2,3")
        assert result.exit_code == 0
        assert data["ok"] is True
        assert data["op"] == "map"
        assert data["data"]["result"] == [1, 4, 9]

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["map", "inc", "1,2"])
        assert result.exit_code == 0
        assert "OK: map" in result.output
        assert "result: [2, 3]" in result.output

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "map", "double", "1,2"])
        assert result.output.strip() == "[2, 4]"

    def test_float_type(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "--type", "float", "map", "half", "1,3")
        assert data["data"]["result"] == [0.5, 1.5]

    def test_non_finite_floats_survive_json(self, cli_runner: CliRunner) -> None:
        result, data = invoke_json(cli_runner, "--type", "float", "map", "double", "inf,nan")
        assert result.exit_code == 0
        assert "Infinity" in result.output
        inf, nan = data["data"]["result"]
        assert math.isinf(inf) and inf > 0
        assert math.isnan(nan)

    def test_unknown_transform_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["map", "cube", "1,2"])
        assert result.exit_code == 2

    def test_unparseable_value_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["map", "inc", "1,x"])
        assert result.exit_code == 2
        assert "sequence of int" in result.output

    def test_invocation_error_exit_code(self, cli_runner: CliRunner) -> None:
        result, data = invoke_json(cli_runner, "--type", "str", "map", "neg", "a")
        assert result.exit_code == 1
        assert data["error"]["code"] == "INVOCATION_ERROR"

    def test_empty_sequence(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "map", "inc", "")
        assert data["data"] == {"result": [], "count": 0}


class TestFilterCommand:
    def test_filter(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "filter", "even", "1,2,3,4")
        assert data["data"]["result"] == [2, 4]
        assert data["data"]["dropped"] == 2

    def test_string_truthiness(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "--type", "str", "filter", "truthy", "a,,b")
        assert data["data"]["result"] == ["a", "b"]


class TestFlatMapCommand:
    def test_range3(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "flat-map", "range3", "1,2,3,4")
        assert data["data"]["result"] == [1, 2, 3, 2, 3, 4, 3, 4, 5, 4, 5, 6]


class TestSortReverse:
    def test_sort(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "sort", "8,4,9,1")
        assert data["data"]["result"] == [1, 4, 8, 9]

    def test_sort_desc(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "sort", "--desc", "8,4,9,1")
        assert data["data"]["result"] == [9, 8, 4, 1]

    def test_sort_strings(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "-t", "str", "sort", "pear,apple,fig")
        assert data["data"]["result"] == ["apple", "fig", "pear"]

    def test_reverse(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "reverse", "1,2,3")
        assert data["data"]["result"] == [3, 2, 1]


class TestPipelineCommand:
    def test_stages_left_to_right(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(cli_runner, "pipeline", "-f", "inc", "-f", "square", "1,2,3")
        assert data["data"]["result"] == [4, 9, 16]
        assert data["data"]["stages"] == ["inc", "square"]

    def test_negative_values_after_separator(self, cli_runner: CliRunner) -> None:
        _, data = invoke_json(
            cli_runner, "pipeline", "-f", "abs", "-f", "str", "-f", "len", "--", "-100,7"
        )
        assert data["data"]["result"] == [3, 1]

    def test_stage_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pipeline", "1,2"])
        assert result.exit_code == 2
