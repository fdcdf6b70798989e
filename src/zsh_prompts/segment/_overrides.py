"""Caller-supplied color overrides for git segments."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Self

from zsh_prompts.segment._color import Color, try_parse_color

if TYPE_CHECKING:
    from collections.abc import Mapping

    from structlog.typing import FilteringBoundLogger

    from zsh_prompts.enums import ColorRole


@dataclass(frozen=True, slots=True)
class ColorOverrides:
    """One optional color per role, plus a global default override.

    Attributes:
        default: Global override applied to every role without its own.
        vcs_icon: Override for the remote-provenance and VCS icons.
        branch: Override for the HEAD description (branch or detached).
        staged: Override for the staged count.
        unstaged: Override for the unstaged count.
        untracked: Override for the untracked count.
        conflict: Override for the conflict count.
        stashed: Override for the stash icon.
        clean: Override for the clean icon.
        ahead: Override for the ahead count.
        behind: Override for the behind count.
    """

    default: Color | None = None
    vcs_icon: Color | None = None
    branch: Color | None = None
    staged: Color | None = None
    unstaged: Color | None = None
    untracked: Color | None = None
    conflict: Color | None = None
    stashed: Color | None = None
    clean: Color | None = None
    ahead: Color | None = None
    behind: Color | None = None

    @classmethod
    def from_strings(
        cls,
        specs: Mapping[str, str | None],
        *,
        logger: FilteringBoundLogger | None = None,
    ) -> Self:
        """Build overrides from color specification strings.

        Unparseable specifications are treated as not provided. Keys that
        do not name an override field are ignored.

        Args:
            specs: Mapping of field name to color specification.
            logger: Optional logger for dropped specifications.

        Returns:
            Overrides with every valid specification applied.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Color] = {}
        for name, spec in specs.items():
            if name not in known or spec is None:
                continue
            color = try_parse_color(spec)
            if color is None:
                if logger is not None:
                    logger.debug("Ignoring invalid color override", role=name, spec=spec)
                continue
            values[name] = color
        return cls(**values)

    def for_role(self, role: ColorRole) -> Color | None:
        """Return the role-specific override, ignoring the global default."""
        return getattr(self, role.value)

    def merged_over(self, base: ColorOverrides) -> ColorOverrides:
        """Layer these overrides on top of ``base``.

        Fields set here win; unset fields fall back to ``base``.

        Args:
            base: Lower-precedence overrides.

        Returns:
            A new ColorOverrides instance.
        """
        changes = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return replace(base, **changes)
