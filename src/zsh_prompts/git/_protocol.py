"""Protocol definition for repository inspectors.

A repository inspector answers the individual questions the snapshot is
built from. Two implementations exist: one embedding dulwich and one
running the ``git`` executable. Both are read-only.

Implementations may raise from any method other than ``is_repository``;
callers are expected to degrade failures to empty values. ``is_repository``
must be answered first, and the other methods are only called when it
returned True.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from zsh_prompts.git._models import HeadInfo, StatusTally


@runtime_checkable
class RepositoryInspector(Protocol):
    """Capability interface for querying one working tree."""

    def is_repository(self) -> bool:
        """Whether the inspected directory is inside a git work tree."""
        ...

    def remote_url(self, name: str = "origin") -> str | None:
        """Return the URL of the named remote, or None if not configured."""
        ...

    def head_info(self) -> HeadInfo:
        """Classify HEAD as on a branch, detached, or unborn."""
        ...

    def status_tally(self) -> StatusTally:
        """Count staged, unstaged, untracked and conflicted entries."""
        ...

    def ahead_behind(self, branch: str) -> tuple[int, int]:
        """Count commits ahead of and behind the branch's upstream.

        Returns ``(0, 0)`` when the branch has no upstream configured.
        """
        ...

    def has_stash(self) -> bool:
        """Whether at least one stash entry exists."""
        ...

    def close(self) -> None:
        """Release any resources held by the inspector."""
        ...
