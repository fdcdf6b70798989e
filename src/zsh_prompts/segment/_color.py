"""Terminal color model.

Colors are either one of the eight classic named terminal colors or a
24-bit RGB triple. Both kinds parse from and print to a canonical lowercase
string form (``"red"``, ``"#1a2b3c"``) and render as the parameter part of
an SGR foreground escape sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from zsh_prompts.exceptions import InvalidColorSpecError

_HEX_DIGITS: Final = frozenset("0123456789abcdef")
_SHORT_HEX_LENGTH: Final = 4  # "#rgb"
_LONG_HEX_LENGTH: Final = 7  # "#rrggbb"


class NamedColor(StrEnum):
    """The eight classic terminal colors, in SGR code order."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def ansi_code(self) -> str:
        """SGR foreground code, 30 (black) through 37 (white)."""
        return str(30 + _NAMED_ORDER.index(self))


_NAMED_ORDER: Final = tuple(NamedColor)


@dataclass(frozen=True, slots=True)
class RgbColor:
    """A 24-bit truecolor value.

    Attributes:
        red: Red component, 0-255.
        green: Green component, 0-255.
        blue: Blue component, 0-255.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} component must be an int, got {type(value).__name__}"
                raise TypeError(msg)
            if not 0 <= value <= 255:  # noqa: PLR2004
                msg = f"{name} component out of range 0-255: {value}"
                raise ValueError(msg)

    @property
    def ansi_code(self) -> str:
        """SGR truecolor foreground parameters."""
        return f"38;2;{self.red};{self.green};{self.blue}"

    def __str__(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


type Color = NamedColor | RgbColor


def _decode_hex(digits: str, spec: str) -> int:
    if not digits or any(ch not in _HEX_DIGITS for ch in digits):
        raise InvalidColorSpecError(spec)
    return int(digits, 16)


def parse_color(spec: str) -> Color:
    """Parse a color specification.

    Accepts the eight color names or ``#RGB`` / ``#RRGGBB`` hex forms,
    case-insensitively. Shorthand hex duplicates each nibble, so ``#abc``
    equals ``#aabbcc``.

    Args:
        spec: The color specification.

    Returns:
        The parsed color.

    Raises:
        InvalidColorSpecError: If the specification has any other shape or
            contains an invalid hex digit.
    """
    lowered = spec.lower()

    try:
        return NamedColor(lowered)
    except ValueError:
        pass

    if not lowered.startswith("#"):
        raise InvalidColorSpecError(spec)

    digits = lowered[1:]
    if len(lowered) == _LONG_HEX_LENGTH:
        red, green, blue = (
            _decode_hex(digits[i : i + 2], spec) for i in range(0, 6, 2)
        )
    elif len(lowered) == _SHORT_HEX_LENGTH:
        red, green, blue = (_decode_hex(nibble * 2, spec) for nibble in digits)
    else:
        raise InvalidColorSpecError(spec)

    return RgbColor(red, green, blue)


def try_parse_color(spec: str | None) -> Color | None:
    """Parse a color specification, treating invalid input as absent.

    Args:
        spec: The color specification, or None.

    Returns:
        The parsed color, or None if spec is None or cannot be parsed.
    """
    if spec is None:
        return None
    try:
        return parse_color(spec)
    except InvalidColorSpecError:
        return None


def format_color(color: Color) -> str:
    """Return the canonical string form of a color.

    Args:
        color: The color to format.

    Returns:
        The lowercase color name or ``#rrggbb`` hex string.
    """
    return str(color)
