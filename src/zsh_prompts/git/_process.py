"""Repository inspector backed by the ``git`` executable.

Each capability is answered by one or two short-lived ``git`` processes.
Commands run with ``GIT_OPTIONAL_LOCKS=0`` so that ``git status`` never
refreshes (writes) the index, keeping inspection read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Self

from zsh_prompts.exceptions import GitCommandError
from zsh_prompts.git._common import DEFAULT_REMOTE, STASH_REF, strip_refs_heads
from zsh_prompts.git._models import HeadInfo, StatusTally
from zsh_prompts.git._porcelain import parse_porcelain_v2
from zsh_prompts.utils._exec import CommandConfig, CommandResult, run_command
from zsh_prompts.utils._logging import create_null_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path
    from types import TracebackType

    from structlog.typing import FilteringBoundLogger

_GIT_ENV: Final[Mapping[str, str]] = MappingProxyType({
    "GIT_OPTIONAL_LOCKS": "0",
    "GIT_TERMINAL_PROMPT": "0",
    "LC_ALL": "C",
})

# `git symbolic-ref -q` exits 1 when HEAD is not a symbolic ref.
_NOT_SYMBOLIC_EXIT_CODE: Final = 1


class GitProcessInspector:
    """Inspect a working tree by running ``git`` subprocesses.

    Attributes:
        cwd: Directory the commands run in, or None for the process cwd.
    """

    __slots__: Final = ("_executable", "_logger", "_timeout", "cwd")

    def __init__(
        self,
        cwd: Path | str | None = None,
        *,
        executable: str = "git",
        timeout: float | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize the inspector.

        Args:
            cwd: Directory to inspect. If None, uses the current directory.
            executable: Name or path of the git executable.
            timeout: Per-command timeout in seconds, or None for no timeout.
            logger: Optional logger for command diagnostics.
        """
        self.cwd: Path | str | None = cwd
        self._executable: str = executable
        self._timeout: float | None = timeout
        self._logger: FilteringBoundLogger = logger or create_null_logger()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Nothing to release; present for interface parity."""

    def _run(self, *args: str) -> CommandResult:
        """Run git, raising only when the process could not run at all."""
        result = run_command(
            CommandConfig(
                args=(self._executable, *args),
                cwd=self.cwd,
                env=_GIT_ENV,
                timeout=self._timeout,
            )
        )
        self._logger.debug(
            "git command finished",
            git_args=list(args),
            exit_code=result.exit_code,
            error=result.error,
        )
        if not result.success:
            msg = result.error or "git could not be run"
            raise GitCommandError(msg, git_args=args)
        return result

    def _check(self, *args: str) -> str:
        """Run git and return stdout, raising on a non-zero exit."""
        result = self._run(*args)
        if not result.ok:
            msg = f"git {args[0]} exited with status {result.exit_code}"
            raise GitCommandError(
                msg,
                git_args=args,
                returncode=result.exit_code,
                stderr=result.stderr.strip(),
            )
        return result.stdout

    def is_repository(self) -> bool:
        try:
            output = self._check("rev-parse", "--is-inside-work-tree")
        except GitCommandError:
            return False
        return output.strip() == "true"

    def remote_url(self, name: str = DEFAULT_REMOTE) -> str | None:
        result = self._run("remote", "get-url", name)
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def head_info(self) -> HeadInfo:
        symbolic = self._run("symbolic-ref", "-q", "HEAD")
        if symbolic.exit_code == _NOT_SYMBOLIC_EXIT_CODE:
            commit_id = self._check("rev-parse", "--verify", "-q", "HEAD")
            return HeadInfo.detached(commit_id)
        if not symbolic.ok:
            msg = f"git symbolic-ref exited with status {symbolic.exit_code}"
            raise GitCommandError(
                msg,
                git_args=("symbolic-ref", "-q", "HEAD"),
                returncode=symbolic.exit_code,
                stderr=symbolic.stderr.strip(),
            )

        branch = strip_refs_heads(symbolic.stdout.strip()) or ""
        if not self._run("rev-parse", "--verify", "-q", "HEAD").ok:
            return HeadInfo.unborn(branch)
        return HeadInfo.on_branch(branch)

    def status_tally(self) -> StatusTally:
        output = self._check(
            "status",
            "--porcelain=v2",
            "-z",
            "--untracked-files=normal",
        )
        return parse_porcelain_v2(output)

    def ahead_behind(self, branch: str) -> tuple[int, int]:
        upstream = self._run("rev-parse", "--symbolic-full-name", f"{branch}@{{upstream}}")
        if not upstream.ok:
            return 0, 0

        output = self._check(
            "rev-list", "--left-right", "--count", f"{branch}...{branch}@{{upstream}}"
        )
        counts = output.split()
        if len(counts) != 2 or not all(count.isdigit() for count in counts):  # noqa: PLR2004
            msg = f"Unexpected rev-list output: {output!r}"
            raise GitCommandError(msg, git_args=("rev-list",))
        return int(counts[0]), int(counts[1])

    def has_stash(self) -> bool:
        return self._run("rev-parse", "--verify", "-q", STASH_REF).ok
