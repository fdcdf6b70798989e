# pyright: reportExplicitAny=false
"""Unit tests for the shared CLI utilities module."""

import tomllib
from io import StringIO

import orjson
import pytest
from rich.console import Console

from zsh_prompts.cli._commands._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    format_toml,
    get_error_console,
)


class TestExitCode:
    def test_exit_code_values_are_unique(self) -> None:
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_values(self) -> None:
        assert ExitCode.SUCCESS == 0
        assert ExitCode.LOAD_ERROR == 1


class TestFormatters:
    def test_format_json_indented(self) -> None:
        output = format_json({"git": {"backend": "dulwich"}})
        assert "\n  " in output
        assert orjson.loads(output) == {"git": {"backend": "dulwich"}}

    def test_format_json_compact(self) -> None:
        assert format_json({"a": 1}, indent=False) == '{"a":1}'

    def test_format_toml(self) -> None:
        output = format_toml({"git": {"colors": {"branch": "red"}}})
        assert tomllib.loads(output) == {"git": {"colors": {"branch": "red"}}}


class TestErrors:
    def test_get_error_console_writes_to_stderr(self) -> None:
        assert get_error_console().stderr is True

    def test_exit_with_error(self) -> None:
        buffer = StringIO()
        console = Console(file=buffer, color_system=None, width=80)

        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("broken config", ExitCode.LOAD_ERROR, console=console)

        assert exc_info.value.code == ExitCode.LOAD_ERROR
        assert "Error: broken config" in buffer.getvalue()
