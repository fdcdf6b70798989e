"""zsh-prompts configuration.

This module provides the public API for configuration management,
including loading, merging and typed access to configuration values.

Example:
    >>> from zsh_prompts.config import Config
    >>> config = Config.load()
    >>> config.git.backend
    <InspectorBackend.DULWICH: 'dulwich'>
"""

from zsh_prompts.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._load import STRICT_CONFIG_ENV, safe_load_config
from ._loader import (
    ENV_PREFIX,
    copy_value,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import Config, GitConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "STRICT_CONFIG_ENV",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "GitConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "copy_value",
    "deep_merge",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
