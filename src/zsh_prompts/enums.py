"""Enumeration types for zsh-prompts."""

from enum import StrEnum


class ColorRole(StrEnum):
    """Override slots for git segment colors.

    Each role maps to exactly one field of ColorOverrides. The global
    ``default`` override is not a role; it applies to every role.
    """

    VCS_ICON = "vcs_icon"
    BRANCH = "branch"
    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"
    CONFLICT = "conflict"
    STASHED = "stashed"
    CLEAN = "clean"
    AHEAD = "ahead"
    BEHIND = "behind"


class SegmentSlot(StrEnum):
    """Positions in the git segment sequence that carry a built-in color."""

    REMOTE_ICON = "remote_icon"
    VCS_ICON = "vcs_icon"
    BRANCH = "branch"
    DETACHED = "detached"
    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"
    CONFLICT = "conflict"
    STASHED = "stashed"
    CLEAN = "clean"
    AHEAD = "ahead"
    BEHIND = "behind"


class RemoteHostKind(StrEnum):
    """Hosting provider of the ``origin`` remote."""

    GITHUB = "github"
    GITLAB = "gitlab"
    OTHER = "other"


class HeadKind(StrEnum):
    """State of HEAD in a working tree."""

    BRANCH = "branch"
    DETACHED = "detached"
    UNBORN = "unborn"


class InspectorBackend(StrEnum):
    """Implementation used to query repository state."""

    DULWICH = "dulwich"
    PROCESS = "process"
