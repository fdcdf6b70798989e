"""Nerd Font glyphs used by git segments."""

from types import MappingProxyType
from typing import Final

from zsh_prompts.enums import RemoteHostKind

REMOTE_ICONS: Final = MappingProxyType({
    RemoteHostKind.GITHUB: "",  # nf-cod-github
    RemoteHostKind.GITLAB: "",  # nf-fa-gitlab
    RemoteHostKind.OTHER: "\U000f02a2",  # nf-md-git
})

VCS_ICON: Final = ""  # nf-dev-git_branch
CONFLICT_ICON: Final = ""  # nf-fa-warning
STASH_ICON: Final = ""  # nf-fa-inbox
CLEAN_ICON: Final = ""  # nf-fa-check

STAGED_MARKER: Final = "+"
UNSTAGED_MARKER: Final = "!"
UNTRACKED_MARKER: Final = "?"
AHEAD_MARKER: Final = "↑"  # ↑
BEHIND_MARKER: Final = "↓"  # ↓
DETACHED_PREFIX: Final = ":"
UNKNOWN_BRANCH: Final = "unknown"
