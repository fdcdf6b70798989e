"""zsh-prompts CLI commands."""
# pyright: reportUnusedCallResult=false

from __future__ import annotations

from typing import TYPE_CHECKING

from ._config import app as config_app
from ._context import CLIContext, OutputFormat
from ._git import git_command
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    format_toml,
    get_error_console,
)

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "config_app",
    "exit_with_error",
    "format_json",
    "format_toml",
    "get_error_console",
    "git_command",
    "register_commands",
]


def register_commands(app: App) -> None:
    app.command(git_command, name="git")
    app.command(config_app)
