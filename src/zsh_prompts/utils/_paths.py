from pathlib import Path

import platformdirs

APP_NAME = "zsh-prompts"


def get_user_config_dir() -> Path:
    """Get the platform-specific user configuration directory."""
    return platformdirs.user_config_path(APP_NAME)


def get_user_config_file() -> Path:
    """Get the path to the user configuration file.

    - Linux: ``~/.config/zsh-prompts/config.toml``
    - macOS: ``~/Library/Application Support/zsh-prompts/config.toml``
    - Windows: ``%LOCALAPPDATA%\\zsh-prompts\\config.toml``

    The path is returned regardless of whether the file exists.
    """
    return get_user_config_dir() / "config.toml"


def get_log_dir() -> Path:
    """Get the platform-specific user log directory."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file inside the log directory."""
    return get_log_dir() / "zsh-prompts.log"
