"""Best-effort repository snapshot collection.

``take_snapshot`` asks an inspector each question once and assembles the
answers into a RepositoryStatus. Detection short-circuits: outside a work
tree no further query is issued. Every other query degrades independently
to its category's empty value when it fails, so a snapshot of a work tree
is always complete.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from zsh_prompts.enums import RemoteHostKind
from zsh_prompts.git._common import classify_remote
from zsh_prompts.git._models import HeadInfo, RepositoryStatus, StatusTally
from zsh_prompts.utils._logging import create_null_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from structlog.typing import FilteringBoundLogger

    from zsh_prompts.git._protocol import RepositoryInspector

T = TypeVar("T")


def _degrade(
    query: Callable[[], T],
    fallback: T,
    *,
    capability: str,
    logger: FilteringBoundLogger,
) -> T:
    """Run one inspector query, returning ``fallback`` if it raises."""
    try:
        return query()
    except Exception as e:  # noqa: BLE001 - a prompt must never fail on git errors
        logger.debug(
            "Repository query failed",
            capability=capability,
            error=str(e),
            error_type=type(e).__name__,
        )
        return fallback


def take_snapshot(
    inspector: RepositoryInspector,
    *,
    logger: FilteringBoundLogger | None = None,
) -> RepositoryStatus:
    """Collect a complete snapshot of the inspected work tree.

    Args:
        inspector: Repository inspector for the directory of interest.
        logger: Optional logger for degraded queries.

    Returns:
        The snapshot. ``is_repository`` is False outside a work tree, in
        which case no query other than detection was issued.
    """
    if logger is None:
        logger = create_null_logger()

    if not _degrade(inspector.is_repository, False, capability="is_repository", logger=logger):
        return RepositoryStatus.not_a_repository()

    remote_host_kind = _degrade(
        lambda: classify_remote(inspector.remote_url()),
        RemoteHostKind.OTHER,
        capability="remote_url",
        logger=logger,
    )
    head = _degrade(inspector.head_info, HeadInfo.unborn(), capability="head_info", logger=logger)
    tally = _degrade(
        inspector.status_tally, StatusTally(), capability="status_tally", logger=logger
    )

    ahead, behind = 0, 0
    branch = head.branch
    if branch is not None:
        ahead, behind = _degrade(
            lambda: inspector.ahead_behind(branch),
            (0, 0),
            capability="ahead_behind",
            logger=logger,
        )

    has_stash = _degrade(inspector.has_stash, False, capability="has_stash", logger=logger)

    return RepositoryStatus(
        is_repository=True,
        remote_host_kind=remote_host_kind,
        head=head,
        tally=tally,
        has_stash=has_stash,
        ahead=ahead,
        behind=behind,
    )
