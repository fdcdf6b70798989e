"""Git status aggregation into prompt segments.

The aggregator turns a RepositoryStatus snapshot into the ordered segment
sequence shown in the prompt:

1. Remote-provenance icon.
2. VCS icon followed by the HEAD description.
3. Staged, unstaged, untracked and conflict counts (only those above zero).
4. Stash icon when a stash exists.
5. Clean icon when neither 3 nor 4 produced a segment.
6. Ahead and behind counts (only those above zero).

Outside a work tree the sequence is empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from zsh_prompts.enums import HeadKind, InspectorBackend, SegmentSlot
from zsh_prompts.git._dulwich import DulwichInspector
from zsh_prompts.git._icons import (
    AHEAD_MARKER,
    BEHIND_MARKER,
    CLEAN_ICON,
    CONFLICT_ICON,
    DETACHED_PREFIX,
    REMOTE_ICONS,
    STAGED_MARKER,
    STASH_ICON,
    UNKNOWN_BRANCH,
    UNSTAGED_MARKER,
    UNTRACKED_MARKER,
    VCS_ICON,
)
from zsh_prompts.git._process import GitProcessInspector
from zsh_prompts.git._snapshot import take_snapshot
from zsh_prompts.segment import ColorOverrides, Segment, resolve_slot
from zsh_prompts.utils._logging import create_null_logger

if TYPE_CHECKING:
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from zsh_prompts.git._models import HeadInfo, RepositoryStatus
    from zsh_prompts.git._protocol import RepositoryInspector


def create_inspector(
    backend: InspectorBackend | str = InspectorBackend.DULWICH,
    cwd: Path | str | None = None,
    *,
    timeout: float | None = None,
    logger: FilteringBoundLogger | None = None,
) -> RepositoryInspector:
    """Create a repository inspector for the given backend.

    Args:
        backend: Which implementation to use.
        cwd: Directory to inspect. If None, uses the current directory.
        timeout: Per-command timeout in seconds for the process backend.
            Ignored by the dulwich backend.
        logger: Optional logger passed to the inspector.

    Returns:
        A new inspector. The caller is responsible for closing it.

    Raises:
        ValueError: If ``backend`` does not name a known backend.
    """
    match InspectorBackend(backend):
        case InspectorBackend.PROCESS:
            return GitProcessInspector(cwd, timeout=timeout, logger=logger)
        case InspectorBackend.DULWICH:
            return DulwichInspector(cwd, logger=logger)


def _head_text(head: HeadInfo) -> str:
    match head.kind:
        case HeadKind.BRANCH:
            return head.name
        case HeadKind.DETACHED:
            return f"{DETACHED_PREFIX}{head.name}"
        case HeadKind.UNBORN:
            return head.name or UNKNOWN_BRANCH


def build_segments(
    status: RepositoryStatus,
    overrides: ColorOverrides | None = None,
) -> list[Segment]:
    """Convert a repository snapshot into ordered, colored segments.

    Args:
        status: Snapshot to render.
        overrides: Caller color overrides. If None, built-in defaults apply.

    Returns:
        The segment sequence; empty when ``status`` is not a repository.
    """
    if not status.is_repository:
        return []

    if overrides is None:
        overrides = ColorOverrides()

    def segment(text: str, slot: SegmentSlot) -> Segment:
        return Segment(text, resolve_slot(slot, overrides))

    head_slot = SegmentSlot.DETACHED if status.head.kind is HeadKind.DETACHED else SegmentSlot.BRANCH
    segments = [
        segment(REMOTE_ICONS[status.remote_host_kind], SegmentSlot.REMOTE_ICON),
        segment(VCS_ICON, SegmentSlot.VCS_ICON),
        segment(_head_text(status.head), head_slot),
    ]

    tally = status.tally
    for marker, count, slot in (
        (STAGED_MARKER, tally.staged, SegmentSlot.STAGED),
        (UNSTAGED_MARKER, tally.unstaged, SegmentSlot.UNSTAGED),
        (UNTRACKED_MARKER, tally.untracked, SegmentSlot.UNTRACKED),
        (CONFLICT_ICON, tally.conflicts, SegmentSlot.CONFLICT),
    ):
        if count > 0:
            segments.append(segment(f"{marker}{count}", slot))

    if status.has_stash:
        segments.append(segment(STASH_ICON, SegmentSlot.STASHED))

    if not status.is_dirty:
        segments.append(segment(CLEAN_ICON, SegmentSlot.CLEAN))

    if status.ahead > 0:
        segments.append(segment(f"{AHEAD_MARKER}{status.ahead}", SegmentSlot.AHEAD))
    if status.behind > 0:
        segments.append(segment(f"{BEHIND_MARKER}{status.behind}", SegmentSlot.BEHIND))

    return segments


def aggregate(
    overrides: ColorOverrides | None = None,
    *,
    inspector: RepositoryInspector | None = None,
    cwd: Path | str | None = None,
    backend: InspectorBackend | str = InspectorBackend.DULWICH,
    timeout: float | None = None,
    logger: FilteringBoundLogger | None = None,
) -> list[Segment]:
    """Inspect a work tree and produce its git segments.

    Args:
        overrides: Caller color overrides. If None, built-in defaults apply.
        inspector: Inspector to query. If None, one is created for ``cwd``
            with ``backend`` and closed before returning.
        cwd: Directory to inspect when no inspector is given.
        backend: Backend used when no inspector is given.
        timeout: Per-command timeout for the process backend.
        logger: Optional logger for diagnostics.

    Returns:
        The segment sequence; empty outside a work tree.
    """
    if logger is None:
        logger = create_null_logger()

    if inspector is not None:
        status = take_snapshot(inspector, logger=logger)
    else:
        owned = create_inspector(backend, cwd, timeout=timeout, logger=logger)
        try:
            status = take_snapshot(owned, logger=logger)
        finally:
            owned.close()

    logger.debug(
        "Repository snapshot taken",
        is_repository=status.is_repository,
        head=status.head.kind.value,
        staged=status.staged_count,
        unstaged=status.unstaged_count,
        untracked=status.untracked_count,
        conflicts=status.conflict_count,
        has_stash=status.has_stash,
        ahead=status.ahead,
        behind=status.behind,
    )
    return build_segments(status, overrides)
