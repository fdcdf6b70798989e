"""Shared utilities: logging, paths and subprocess execution."""

from ._exec import CommandConfig, CommandResult, run_command
from ._logging import create_cli_logger, create_null_logger
from ._paths import (
    APP_NAME,
    get_cli_log_file,
    get_log_dir,
    get_user_config_dir,
    get_user_config_file,
)

__all__ = [
    "APP_NAME",
    "CommandConfig",
    "CommandResult",
    "create_cli_logger",
    "create_null_logger",
    "get_cli_log_file",
    "get_log_dir",
    "get_user_config_dir",
    "get_user_config_file",
    "run_command",
]
