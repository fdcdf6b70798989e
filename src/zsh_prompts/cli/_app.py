"""The command-line interface for zsh-prompts."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from zsh_prompts.config import safe_load_config
from zsh_prompts.utils import create_cli_logger, create_null_logger

from ._commands import register_commands
from ._commands._context import CLIContext

_HELP = "Colored prompt segments for zsh."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="zsh-prompts",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Log at debug level")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch zsh-prompts with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Log at debug level regardless of configuration.
            config: Explicit path to config file.
        """
        cli_overrides: dict[str, object] | None = None
        if verbose:
            cli_overrides = {"logging": {"level": "debug"}}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=cli_overrides,
        )

        try:
            cli_logger = create_cli_logger(
                level=loaded_config.logging.level.value,
                log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
                log_file=loaded_config.logging.file,
                max_bytes=loaded_config.logging.max_bytes,
                backup_count=loaded_config.logging.backup_count,
            )
        except OSError:
            # An unwritable log location must not break the prompt
            cli_logger = create_null_logger()
        if config_error is not None:
            cli_logger.warning("Failed to load config, using defaults", error=config_error)

        ctx = CLIContext(
            config=loaded_config,
            verbose=verbose,
            config_error=config_error,
            logger=cli_logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `zsh-prompts` CLI."""
    app.meta()


if __name__ == "__main__":
    main()
