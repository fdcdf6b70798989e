"""Repository snapshot models.

This module provides the immutable values produced by repository
inspection: HEAD state, working-tree status tallies, and the complete
point-in-time RepositoryStatus snapshot consumed by the aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from zsh_prompts.enums import HeadKind, RemoteHostKind
from zsh_prompts.git._common import short_commit_id


@dataclass(frozen=True, slots=True)
class HeadInfo:
    """State of HEAD.

    Attributes:
        kind: Whether HEAD is on a branch, detached, or unborn.
        name: Branch name for ``BRANCH``; the seven-character abbreviated
            commit id for ``DETACHED``; the branch HEAD points at (if known,
            else empty) for ``UNBORN``.
    """

    kind: HeadKind
    name: str = ""

    @classmethod
    def on_branch(cls, name: str) -> Self:
        return cls(HeadKind.BRANCH, name)

    @classmethod
    def detached(cls, commit_id: bytes | str) -> Self:
        return cls(HeadKind.DETACHED, short_commit_id(commit_id))

    @classmethod
    def unborn(cls, name: str = "") -> Self:
        return cls(HeadKind.UNBORN, name)

    @property
    def branch(self) -> str | None:
        """Branch name when HEAD is on a branch, otherwise None."""
        return self.name if self.kind is HeadKind.BRANCH else None


@dataclass(frozen=True, slots=True)
class StatusTally:
    """Counts of working-tree entries per category.

    A partially staged file counts once in ``staged`` and once in
    ``unstaged``; no entry counts twice within one category.

    Attributes:
        staged: Entries with index-side changes.
        unstaged: Entries with working-tree-side changes.
        untracked: Entries not yet in the index.
        conflicts: Unmerged entries.
    """

    staged: int = 0
    unstaged: int = 0
    untracked: int = 0
    conflicts: int = 0

    def __post_init__(self) -> None:
        for name in ("staged", "unstaged", "untracked", "conflicts"):
            if getattr(self, name) < 0:
                msg = f"{name} must be non-negative"
                raise ValueError(msg)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.unstaged or self.untracked or self.conflicts)


@dataclass(frozen=True, slots=True)
class RepositoryStatus:
    """Point-in-time snapshot of a working tree.

    When ``is_repository`` is False every other field holds its default and
    must not be consulted.

    Attributes:
        is_repository: Whether the inspected directory is inside a work tree.
        remote_host_kind: Hosting provider of the ``origin`` remote.
        head: HEAD state.
        tally: Working-tree status counts.
        has_stash: Whether at least one stash entry exists.
        ahead: Commits reachable from the branch tip but not its upstream.
        behind: Commits reachable from the upstream tip but not the branch.
    """

    is_repository: bool
    remote_host_kind: RemoteHostKind = RemoteHostKind.OTHER
    head: HeadInfo = field(default_factory=HeadInfo.unborn)
    tally: StatusTally = field(default_factory=StatusTally)
    has_stash: bool = False
    ahead: int = 0
    behind: int = 0

    @classmethod
    def not_a_repository(cls) -> Self:
        return cls(is_repository=False)

    @property
    def staged_count(self) -> int:
        return self.tally.staged

    @property
    def unstaged_count(self) -> int:
        return self.tally.unstaged

    @property
    def untracked_count(self) -> int:
        return self.tally.untracked

    @property
    def conflict_count(self) -> int:
        return self.tally.conflicts

    @property
    def is_dirty(self) -> bool:
        """Whether any file category is populated or a stash exists."""
        return not self.tally.is_clean or self.has_stash
