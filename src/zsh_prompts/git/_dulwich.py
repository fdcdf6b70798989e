"""Repository inspector backed by dulwich.

This inspector reads repository metadata in-process, without spawning
``git``. All operations are read-only; the index is opened for reading and
never written back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Self

from dulwich import porcelain
from dulwich.index import ConflictedIndexEntry
from dulwich.refs import SYMREF

from zsh_prompts.exceptions import GitError
from zsh_prompts.git._common import (
    DEFAULT_REMOTE,
    HEADS_PREFIX,
    REMOTES_PREFIX,
    STASH_REF,
    decode_bytes,
    discover_repo,
    get_worktree_dir,
    strip_refs_heads,
)
from zsh_prompts.git._models import HeadInfo, StatusTally
from zsh_prompts.utils._logging import create_null_logger

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from dulwich.repo import Repo
    from structlog.typing import FilteringBoundLogger

_HEAD: Final = b"HEAD"
# branch.<name>.remote value for an upstream in the same repository
_LOCAL_REMOTE: Final = b"."


def _count_commits(repo: Repo, include: bytes, exclude: bytes) -> int:
    """Count commits reachable from ``include`` but not from ``exclude``."""
    walker = repo.get_walker(include=[include], exclude=[exclude])
    return sum(1 for _ in walker)


class DulwichInspector:
    """Inspect a working tree with dulwich.

    The repository is discovered lazily by ``is_repository`` and closed by
    ``close`` (or on leaving the context manager).
    """

    __slots__: Final = ("_cwd", "_discovered", "_logger", "_repo")

    def __init__(
        self,
        cwd: Path | str | None = None,
        *,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize the inspector.

        Args:
            cwd: Directory to start repository discovery from. If None,
                uses the current directory.
            logger: Optional logger for diagnostics.
        """
        self._cwd: Path | str | None = cwd
        self._logger: FilteringBoundLogger = logger or create_null_logger()
        self._repo: Repo | None = None
        self._discovered: bool = False

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
        """Close the underlying repository, if one was opened."""
        if self._repo is not None:
            self._repo.close()
            self._repo = None

    @property
    def repo(self) -> Repo:
        """The discovered repository.

        Raises:
            GitError: If no work tree was discovered.
        """
        if self._repo is None:
            msg = "No git work tree discovered"
            raise GitError(msg)
        return self._repo

    def is_repository(self) -> bool:
        if not self._discovered:
            self._repo = discover_repo(self._cwd)
            self._discovered = True
            if self._repo is not None:
                self._logger.debug(
                    "Discovered repository", worktree=str(get_worktree_dir(self._repo))
                )
        return self._repo is not None and not self._repo.bare

    def remote_url(self, name: str = DEFAULT_REMOTE) -> str | None:
        config = self.repo.get_config()
        try:
            url = config.get((b"remote", name.encode()), b"url")
        except KeyError:
            return None
        return decode_bytes(url) or None

    def head_info(self) -> HeadInfo:
        refs = self.repo.refs
        raw_head = refs.read_ref(_HEAD)
        if raw_head is None:
            return HeadInfo.unborn()

        if raw_head.startswith(SYMREF):
            target = raw_head[len(SYMREF) :].strip()
            branch = strip_refs_heads(target) or ""
            if target not in refs:
                return HeadInfo.unborn(branch)
            return HeadInfo.on_branch(branch)

        return HeadInfo.detached(raw_head)

    def status_tally(self) -> StatusTally:
        repo = self.repo
        index = repo.open_index()
        conflicted = {
            path
            for path, entry in index.items()
            if isinstance(entry, ConflictedIndexEntry)
        }

        try:
            status = porcelain.status(repo, untracked_files="normal", optional_locks=False)
        except Exception as e:  # noqa: BLE001 - re-raised unless unmerged entries explain it
            # dulwich cannot diff an index with unmerged entries
            if not conflicted:
                raise
            self._logger.debug(
                "Status unavailable with unmerged entries",
                conflicts=len(conflicted),
                error=str(e),
            )
            return StatusTally(conflicts=len(conflicted))

        staged_paths: set[bytes] = set()
        for paths in status.staged.values():  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            staged_paths.update(paths)  # pyright: ignore[reportUnknownArgumentType]
        unstaged_paths: set[bytes] = set(status.unstaged)  # pyright: ignore[reportUnknownMemberType,reportUnknownArgumentType]

        return StatusTally(
            staged=len(staged_paths - conflicted),
            unstaged=len(unstaged_paths - conflicted),
            untracked=len(status.untracked),  # pyright: ignore[reportUnknownMemberType,reportUnknownArgumentType]
            conflicts=len(conflicted),
        )

    def _upstream_ref(self, branch: str) -> bytes | None:
        config = self.repo.get_config()
        section = (b"branch", branch.encode())
        try:
            remote = config.get(section, b"remote")
            merge = config.get(section, b"merge")
        except KeyError:
            return None

        if remote == _LOCAL_REMOTE:
            return merge
        merge_branch = strip_refs_heads(merge)
        return f"{REMOTES_PREFIX}{decode_bytes(remote)}/{merge_branch}".encode()

    def ahead_behind(self, branch: str) -> tuple[int, int]:
        upstream_ref = self._upstream_ref(branch)
        if upstream_ref is None:
            return 0, 0

        refs = self.repo.refs
        try:
            local_sha = refs[f"{HEADS_PREFIX}{branch}".encode()]
            upstream_sha = refs[upstream_ref]
        except KeyError:
            self._logger.debug(
                "Upstream ref missing", branch=branch, upstream=decode_bytes(upstream_ref)
            )
            return 0, 0

        if local_sha == upstream_sha:
            return 0, 0
        return (
            _count_commits(self.repo, local_sha, upstream_sha),
            _count_commits(self.repo, upstream_sha, local_sha),
        )

    def has_stash(self) -> bool:
        return STASH_REF.encode() in self.repo.refs
