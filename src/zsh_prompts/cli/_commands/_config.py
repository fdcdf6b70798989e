# ruff: noqa: A002  # format shadows the builtin to match the flag name
"""Config commands for viewing zsh-prompts configuration."""

from typing import Annotated

from cyclopts import App, Parameter

from zsh_prompts.utils import get_user_config_file

from ._context import CLIContext, OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, format_toml

app = App(name="config", help="View zsh-prompts configuration", help_on_error=True)


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json)"),
    ] = OutputFormat.TOML,
) -> None:
    """Display the effective configuration.

    Shows the configuration merged from defaults, the config file,
    environment variables and global command-line options.

    Args:
        format: Output format (toml, json).
    """
    ctx = CLIContext.get_current()
    if ctx.config_error:
        exit_with_error(ctx.config_error, ExitCode.LOAD_ERROR)

    data = ctx.config.to_dict()
    match format:
        case OutputFormat.JSON:
            output = format_json(data)
        case OutputFormat.TOML:
            output = format_toml(data)

    print(output.rstrip())  # noqa: T201


@app.command(name="path")
def _path() -> None:
    """Print the path of the user config file.

    The path is printed whether or not the file exists.
    """
    print(get_user_config_file())  # noqa: T201
