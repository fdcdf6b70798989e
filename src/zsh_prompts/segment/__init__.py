"""Colors, segments and color resolution.

This package provides the primitives shared by every prompt segment
producer: the color model, the Segment value with its rendering rule, and
the layered color-resolution policy.
"""

from zsh_prompts.segment._color import (
    Color,
    NamedColor,
    RgbColor,
    format_color,
    parse_color,
    try_parse_color,
)
from zsh_prompts.segment._overrides import ColorOverrides
from zsh_prompts.segment._resolve import (
    SLOT_DEFAULTS,
    SLOT_ROLES,
    resolve_color,
    resolve_slot,
)
from zsh_prompts.segment._segment import (
    FOREGROUND_RESET,
    SEGMENT_SEPARATOR,
    Segment,
    render_segments,
)

__all__ = [
    "FOREGROUND_RESET",
    "SEGMENT_SEPARATOR",
    "SLOT_DEFAULTS",
    "SLOT_ROLES",
    "Color",
    "ColorOverrides",
    "NamedColor",
    "RgbColor",
    "Segment",
    "format_color",
    "parse_color",
    "render_segments",
    "resolve_color",
    "resolve_slot",
    "try_parse_color",
]
