"""Tests for the interactive browse command."""

from __future__ import annotations

import json
from pathlib import Path

import pyperclip
import pytest
from click.testing import CliRunner

from domainctl.cli import cli
from domainctl.commands.browse import _parse_position


class TestParsePosition:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [("#1", 1), ("#12", 12), (" #3 ", 3), ("#", None), ("#x", None), ("aaa", None), ("", None)],
    )
    def test_parse(self, line: str, expected: int | None) -> None:
        assert _parse_position(line) == expected


@pytest.mark.usefixtures("_isolated_env")
class TestBrowseCommand:
    def _run(self, runner: CliRunner, catalog_file: Path, keys: str, *extra: str):  # type: ignore[no-untyped-def]
        return runner.invoke(cli, ["--catalog", str(catalog_file), "browse", *extra], input=keys)

    def test_filter_then_quit(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "aaa\n:q\n")
        assert result.exit_code == 0, result.output
        assert "All domains" in result.output
        assert "Found 2 matching domains" in result.output
        assert clipboard_writes == []

    def test_copy_by_position_marks_entry(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "aaa\n#2\n:q\n")
        assert result.exit_code == 0, result.output
        assert clipboard_writes == ["mail.aaa.com"]
        copied_lines = [line for line in result.output.splitlines() if "copied" in line]
        assert copied_lines
        assert all("mail.aaa.com" in line for line in copied_lines)

    def test_initial_query_option(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "#1\n:q\n", "--query", "bbb")
        assert result.exit_code == 0
        assert clipboard_writes == ["bbb.com"]

    def test_no_results_view(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "zzz\n:q\n")
        assert "No matching domains" in result.output

    def test_out_of_range_position(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "#9\n:q\n")
        assert result.exit_code == 0
        assert "No entry #9" in result.output
        assert clipboard_writes == []

    def test_end_of_input_quits(
        self, cli_runner: CliRunner, catalog_file: Path, clipboard_writes: list[str]
    ) -> None:
        result = self._run(cli_runner, catalog_file, "aaa\n")
        assert result.exit_code == 0

    def test_clipboard_failure_reported(
        self, cli_runner: CliRunner, catalog_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def unavailable(text: str) -> None:
            raise pyperclip.PyperclipException("no clipboard")

        monkeypatch.setattr("domainctl.infrastructure.clipboard.pyperclip.copy", unavailable)
        result = self._run(cli_runner, catalog_file, "#1\n:q\n")
        assert result.exit_code == 0
        assert "Could not copy aaa.com" in result.output
        assert "copied" not in result.output.replace("Could not copy", "")

    def test_duplicate_entries_reported(
        self, cli_runner: CliRunner, tmp_path: Path, clipboard_writes: list[str]
    ) -> None:
        path = tmp_path / "dups.txt"
        path.write_text("a.com\nb.com\na.com\n")
        result = self._run(cli_runner, path, ":q\n")
        assert result.exit_code == 0
        assert "WARNING: Duplicate catalog entry ignored: a.com" in result.output
        assert "2 domains in catalog" in result.output

    def test_refused_without_interaction(
        self, cli_runner: CliRunner, catalog_file: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--no-interact", "--catalog", str(catalog_file), "browse"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "INTERACTIVE_DISABLED"
