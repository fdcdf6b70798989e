"""Layered color resolution shared by segment producers.

Precedence, highest first:

1. The role-specific override.
2. The global override.
3. The built-in default for the segment slot.

Resolution is a pure function of its arguments and is evaluated per
segment; nothing is cached between calls.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from zsh_prompts.enums import ColorRole, SegmentSlot
from zsh_prompts.segment._color import NamedColor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from zsh_prompts.segment._color import Color
    from zsh_prompts.segment._overrides import ColorOverrides

SLOT_ROLES: Final[Mapping[SegmentSlot, ColorRole]] = MappingProxyType({
    SegmentSlot.REMOTE_ICON: ColorRole.VCS_ICON,
    SegmentSlot.VCS_ICON: ColorRole.VCS_ICON,
    SegmentSlot.BRANCH: ColorRole.BRANCH,
    SegmentSlot.DETACHED: ColorRole.BRANCH,
    SegmentSlot.STAGED: ColorRole.STAGED,
    SegmentSlot.UNSTAGED: ColorRole.UNSTAGED,
    SegmentSlot.UNTRACKED: ColorRole.UNTRACKED,
    SegmentSlot.CONFLICT: ColorRole.CONFLICT,
    SegmentSlot.STASHED: ColorRole.STASHED,
    SegmentSlot.CLEAN: ColorRole.CLEAN,
    SegmentSlot.AHEAD: ColorRole.AHEAD,
    SegmentSlot.BEHIND: ColorRole.BEHIND,
})

SLOT_DEFAULTS: Final[Mapping[SegmentSlot, Color]] = MappingProxyType({
    SegmentSlot.REMOTE_ICON: NamedColor.BLUE,
    SegmentSlot.VCS_ICON: NamedColor.WHITE,
    SegmentSlot.BRANCH: NamedColor.YELLOW,
    SegmentSlot.DETACHED: NamedColor.RED,
    SegmentSlot.STAGED: NamedColor.GREEN,
    SegmentSlot.UNSTAGED: NamedColor.RED,
    SegmentSlot.UNTRACKED: NamedColor.CYAN,
    SegmentSlot.CONFLICT: NamedColor.MAGENTA,
    SegmentSlot.STASHED: NamedColor.BLUE,
    SegmentSlot.CLEAN: NamedColor.GREEN,
    SegmentSlot.AHEAD: NamedColor.WHITE,
    SegmentSlot.BEHIND: NamedColor.RED,
})


def resolve_color(
    role_default: Color,
    role_override: Color | None,
    global_override: Color | None,
) -> Color:
    """Pick the effective color for one segment.

    Args:
        role_default: Built-in default for the segment.
        role_override: Override set specifically for the segment's role.
        global_override: Override applied to every role.

    Returns:
        The role override if set, else the global override if set, else
        the built-in default.
    """
    if role_override is not None:
        return role_override
    if global_override is not None:
        return global_override
    return role_default


def resolve_slot(slot: SegmentSlot, overrides: ColorOverrides) -> Color:
    """Resolve the color of a segment slot against caller overrides.

    Args:
        slot: The segment slot being colored.
        overrides: Caller-supplied overrides.

    Returns:
        The effective color for the slot.
    """
    role = SLOT_ROLES[slot]
    return resolve_color(SLOT_DEFAULTS[slot], overrides.for_role(role), overrides.default)
