# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration models with typed access.

This module provides the frozen Pydantic models for each configuration
section and the Config container that merges defaults, the user config
file, environment variables and CLI overrides.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from zsh_prompts.config._defaults import DEFAULT_CONFIG
from zsh_prompts.config._loader import copy_value, deep_merge, parse_env_vars, read_toml_file
from zsh_prompts.enums import InspectorBackend
from zsh_prompts.exceptions import ConfigValidationError
from zsh_prompts.segment import ColorOverrides
from zsh_prompts.utils._paths import get_user_config_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty uses the default log file).
        max_bytes: Log file size in bytes before rotation. Rotation is
            enabled only when set together with backup_count.
        backup_count: Number of rotated log files to keep.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.JSON
    file: str = ""
    max_bytes: int | None = Field(default=None, ge=1)
    backup_count: int | None = Field(default=None, ge=0)


class GitConfig(BaseModel):
    """Git segment configuration section.

    Attributes:
        backend: Repository inspector implementation.
        timeout: Seconds allowed per git subprocess; 0 disables the limit.
        colors: Color specifications keyed by ColorOverrides field name.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    backend: InspectorBackend = InspectorBackend.DULWICH
    timeout: float = Field(default=0, ge=0)
    colors: dict[str, str] = Field(default_factory=dict)

    @property
    def timeout_seconds(self) -> float | None:
        """Subprocess timeout, or None when disabled."""
        return self.timeout or None


def _parse_enum[E: StrEnum](enum_type: type[E], value: Any, default: E) -> E:
    """Parse a string into an enum member, falling back to ``default``."""
    try:
        return enum_type(str(value).lower())
    except ValueError:
        return default


def _parse_count(value: Any, *, minimum: int) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        return None
    return value


def _parse_logging(data: dict[str, Any]) -> LoggingConfig:
    """Parse logging section dictionary into LoggingConfig.

    Invalid level, format and rotation values fall back to their defaults.

    Args:
        data: Dictionary containing logging configuration.

    Returns:
        Parsed LoggingConfig instance.
    """
    return LoggingConfig(
        level=_parse_enum(LogLevel, data.get("level", "warning"), LogLevel.WARNING),
        format=_parse_enum(LogFormat, data.get("format", "json"), LogFormat.JSON),
        file=str(data.get("file", "")),
        max_bytes=_parse_count(data.get("max_bytes"), minimum=1),
        backup_count=_parse_count(data.get("backup_count"), minimum=0),
    )


def _parse_git(data: dict[str, Any]) -> GitConfig:
    """Parse git section dictionary into GitConfig.

    An unknown backend falls back to the default. Non-string color values
    are dropped.

    Args:
        data: Dictionary containing git configuration.

    Returns:
        Parsed GitConfig instance.

    Raises:
        ConfigValidationError: If ``timeout`` is not a non-negative number or
            ``colors`` is not a table.
    """
    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        msg = "git.colors must be a table"
        raise ConfigValidationError(msg, key="git.colors")

    try:
        return GitConfig(
            backend=_parse_enum(
                InspectorBackend, data.get("backend", "dulwich"), InspectorBackend.DULWICH
            ),
            timeout=data.get("timeout", 0),
            colors={str(k): v for k, v in colors.items() if isinstance(v, str)},
        )
    except ValidationError as e:
        msg = f"Invalid git configuration: {e.errors()[0]['msg']}"
        raise ConfigValidationError(msg, key="git.timeout") from e


class Config(BaseModel):
    """Configuration container with typed access.

    This class provides immutable, type-safe access to zsh-prompts
    configuration. Use factory methods to create instances rather than the
    constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _path: Path | None = PrivateAttr(default=None)
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _git: GitConfig = PrivateAttr(default_factory=GitConfig)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _path: Path | None = None,
    ) -> None:
        """Initialize configuration container.

        This constructor is intended for internal use. Use factory methods
        like from_dict(), from_file(), or load() to create Config instances.

        Args:
            _data: The complete merged configuration dictionary.
            _path: Config file that contributed to this configuration.

        Raises:
            ConfigValidationError: If a section fails validation.
        """
        super().__init__()
        self._data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._path = _path
        self._logging = _parse_logging(_section(self._data, "logging"))
        self._git = _parse_git(_section(self._data, "git"))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary layered over the defaults.

        Args:
            data: Dictionary of configuration values.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        return cls(_data=deep_merge(DEFAULT_CONFIG, data))

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file layered over the defaults.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        return cls(_data=deep_merge(DEFAULT_CONFIG, data), _path=path)

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order (defaults -> config file ->
        env -> cli). A missing config file contributes nothing.

        Args:
            config_path: Config file to read. If None, uses the user config
                file.
            include_env: Include ``ZSH_PROMPTS_*`` environment variables.
            cli_overrides: Nested dict of CLI argument overrides.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the config file cannot be parsed.
            ConfigValidationError: If the merged config fails validation.
        """
        path = config_path if config_path is not None else get_user_config_file()

        merged = copy_value(DEFAULT_CONFIG)
        source_path: Path | None = None
        if path.is_file():
            merged = deep_merge(merged, read_toml_file(path))
            source_path = path
        if include_env:
            merged = deep_merge(merged, parse_env_vars())
        if cli_overrides:
            merged = deep_merge(merged, cli_overrides)

        return cls(_data=merged, _path=source_path)

    @property
    def path(self) -> Path | None:
        """Config file that contributed to this configuration, if any."""
        return self._path

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration section."""
        return self._logging

    @property
    def git(self) -> GitConfig:
        """Return the git configuration section."""
        return self._git

    def color_overrides(self, *, logger: FilteringBoundLogger | None = None) -> ColorOverrides:
        """Build color overrides from the ``[git.colors]`` table.

        Invalid color specifications are ignored.

        Args:
            logger: Optional logger for ignored specifications.

        Returns:
            The configured overrides.
        """
        return ColorOverrides.from_strings(self._git.colors, logger=logger)

    def to_dict(self) -> dict[str, Any]:
        """Return the effective configuration as a dictionary.

        Section values are the parsed ones, so fallbacks applied to invalid
        values are visible.
        """
        data = copy_value(self._data)
        data["logging"] = self._logging.model_dump(mode="json", exclude_none=True)
        data["git"] = self._git.model_dump(mode="json")
        return data

    def to_toml(self) -> str:
        """Convert the effective configuration to a TOML string."""
        return tomli_w.dumps(self.to_dict())


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a section table, treating a non-table value as empty."""
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}
