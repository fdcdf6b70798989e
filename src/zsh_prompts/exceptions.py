"""zsh-prompts exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ZshPromptsError(Exception):
    """Base exception for zsh-prompts errors."""


class ColorError(ZshPromptsError):
    """Base exception for color errors."""


class InvalidColorSpecError(ColorError, ValueError):
    """Raised when a color specification cannot be parsed.

    Attributes:
        spec: The specification string that failed to parse.
    """

    def __init__(self, spec: str) -> None:
        """Initialize with the offending color specification."""
        super().__init__(f"Invalid color specification: {spec!r}")
        self.spec: str = spec


class GitError(ZshPromptsError):
    """Base exception for git inspection errors."""


class GitCommandError(GitError):
    """Raised when a git subprocess cannot be run or exits unsuccessfully.

    Attributes:
        git_args: The git arguments (without the leading ``git``).
        returncode: Process exit code, or None if the process never ran.
        stderr: Captured standard error output.
    """

    def __init__(
        self,
        message: str,
        *,
        git_args: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize with the failing command context."""
        super().__init__(message)
        self.git_args: tuple[str, ...] = tuple(git_args)
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class ConfigError(ZshPromptsError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration values fail validation."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        """Initialize with error message and the offending key."""
        super().__init__(message)
        self.key: str | None = key
