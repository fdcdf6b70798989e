"""Repository inspection and git segment aggregation.

This package provides two interchangeable repository inspectors (dulwich
and the ``git`` executable), the best-effort snapshot collector built on
them, and the aggregator that renders a snapshot as prompt segments.
"""

from zsh_prompts.git._aggregate import aggregate, build_segments, create_inspector
from zsh_prompts.git._common import classify_remote, discover_repo, short_commit_id
from zsh_prompts.git._dulwich import DulwichInspector
from zsh_prompts.git._models import HeadInfo, RepositoryStatus, StatusTally
from zsh_prompts.git._porcelain import PorcelainParser, parse_porcelain_v2
from zsh_prompts.git._process import GitProcessInspector
from zsh_prompts.git._protocol import RepositoryInspector
from zsh_prompts.git._snapshot import take_snapshot

__all__ = [
    "DulwichInspector",
    "GitProcessInspector",
    "HeadInfo",
    "PorcelainParser",
    "RepositoryInspector",
    "RepositoryStatus",
    "StatusTally",
    "aggregate",
    "build_segments",
    "classify_remote",
    "create_inspector",
    "discover_repo",
    "parse_porcelain_v2",
    "short_commit_id",
    "take_snapshot",
]
