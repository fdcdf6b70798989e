from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any

from zsh_prompts.exceptions import ConfigError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path

STRICT_CONFIG_ENV = "ZSH_PROMPTS_STRICT_CONFIG"


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    ZSH_PROMPTS_STRICT_CONFIG environment variable:
    - If unset or "0": return the default config and the error message, so
      the caller can log it once a logger exists
    - If "1": print the error to stderr and fail fast with sys.exit(1)

    Nothing is ever written to stdout, which belongs to the prompt.

    Args:
        config_path: Explicit path to config file (--config flag). The file
            must exist.
        cli_overrides: CLI argument overrides to pass to Config.load().

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns the default Config with the
        error message.
    """
    strict_mode = os.environ.get(STRICT_CONFIG_ENV, "0") == "1"

    try:
        if config_path is not None and not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)  # noqa: TRY301
        config = Config.load(config_path=config_path, cli_overrides=cli_overrides)
    except (ConfigError, OSError) as e:
        error_msg = str(e) if isinstance(e, ConfigError) else f"Failed to load config: {e}"
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        return Config(), error_msg
    else:
        return config, None
