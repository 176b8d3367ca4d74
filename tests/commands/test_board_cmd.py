"""Tests for the board command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from idiomctl.cli import cli


class TestBoardCommand:
    def test_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board"])
        assert result.exit_code == 0
        assert "size: 2x3" in result.output
        assert "get(0, 0) => 1" in result.output
        assert "get(1, 0) => 1" in result.output
        assert "get(0, 1) => empty" in result.output

    def test_custom_pieces(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "board",
                "--height",
                "8",
                "--width",
                "8",
                "--place",
                "7,4=k",
                "--get",
                "7,4",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["rows"][7][4] == "k"
        assert data["lookups"] == [{"row": 7, "column": 4, "piece": "k"}]

    def test_integer_piece(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "board", "--place", "0,2=5", "--get", "0,2"])
        assert json.loads(result.output)["data"]["lookups"][0]["piece"] == 5

    def test_out_of_bounds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "--get", "2,0"])
        assert result.exit_code == 1
        assert "outside the 2x3 board" in result.output

    def test_out_of_bounds_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "board", "--place", "9,9=Q"])
        assert result.exit_code == 1
        assert '"OUT_OF_BOUNDS"' in result.output

    def test_malformed_coordinate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "--get", "1"])
        assert result.exit_code == 2
        assert "ROW,COL" in result.output

    def test_malformed_placement(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "--place", "0,0"])
        assert result.exit_code == 2

    def test_quiet_keeps_lookups(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "board"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "get(0, 0) => 1",
            "get(1, 0) => 1",
            "get(0, 1) => empty",
        ]

    def test_huge_board_is_invalid_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "board", "--height", "100000000", "--width", "100000000"]
        )
        assert result.exit_code == 1
        assert '"INVALID_INPUT"' in result.output
