"""Prompt segments and their terminal rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from zsh_prompts.segment._color import Color

ESC: Final = "\x1b"
# Resets the foreground only, so background and bold set by the shell survive.
FOREGROUND_RESET: Final = f"{ESC}[39m"
SEGMENT_SEPARATOR: Final = " "


@dataclass(frozen=True, slots=True)
class Segment:
    """One colorable unit of prompt output.

    Attributes:
        text: Literal content to display, independent of color.
        color: Foreground color, or None to emit the text unchanged.
    """

    text: str
    color: Color | None = None

    def format(self) -> str:
        """Render the segment for a terminal.

        Returns:
            The text wrapped in a foreground color sequence and reset when a
            color is set, otherwise the text unchanged.
        """
        if self.color is None:
            return self.text
        return f"{ESC}[{self.color.ansi_code}m{self.text}{FOREGROUND_RESET}"


def render_segments(segments: Iterable[Segment]) -> str:
    """Render segments joined by a single space.

    Empty-text segments still occupy a slot and contribute a separator.

    Args:
        segments: Segments in display order.

    Returns:
        The rendered prompt fragment, without a trailing newline.
    """
    return SEGMENT_SEPARATOR.join(segment.format() for segment in segments)
