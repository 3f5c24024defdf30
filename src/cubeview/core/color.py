"""Mutable RGB color with CSS-style string encoding.

Hex strings and SVG/X11 color names are decoded by ``QColor``; the
``rgb()``, ``rgba()``, ``hsl()`` and ``hsla()`` functional forms are split
here and converted through ``QColor`` as well.  Alpha is ignored.
"""

import re

from PySide6.QtGui import QColor

_FUNCTION_RE = re.compile(r"^(rgba?|hsla?)\(\s*([^()]*?)\s*\)$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)(%|deg)?$")


class ColorStyleError(ValueError):
    """Raised when a color style string cannot be decoded."""


class Color:
    """An RGB color with float channels in 0..1.

    Panel widgets exchange colors as ``"#rrggbb"`` strings; materials hold
    ``Color`` instances.  :meth:`get_style` and :meth:`set_style` translate
    between the two.
    """

    __slots__ = ("r", "g", "b")

    def __init__(self, r: float = 1.0, g: float = 1.0, b: float = 1.0) -> None:
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @staticmethod
    def from_hex(color_int: int) -> "Color":
        """Create a color from an integer hex value (e.g., 0xd4a574)."""
        return Color().set_hex(color_int)

    def set_hex(self, color_int: int) -> "Color":
        color_int = int(color_int)
        self.r = ((color_int >> 16) & 0xFF) / 255.0
        self.g = ((color_int >> 8) & 0xFF) / 255.0
        self.b = (color_int & 0xFF) / 255.0
        return self

    def get_hex(self) -> int:
        r, g, b = (_to_byte(c) for c in (self.r, self.g, self.b))
        return (r << 16) | (g << 8) | b

    def get_style(self) -> str:
        """Return the color as a ``#rrggbb`` string."""
        return f"#{self.get_hex():06x}"

    def set_style(self, style: str) -> "Color":
        """Decode *style* into this color.

        Raises :class:`ColorStyleError` and leaves the color untouched
        when *style* is not a recognised color string.
        """
        self.r, self.g, self.b = parse_style(style)
        return self

    def copy(self) -> "Color":
        return Color(self.r, self.g, self.b)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __repr__(self) -> str:
        return f"Color({self.get_style()!r})"


def parse_style(style: str) -> tuple[float, float, float]:
    """Parse a CSS-like color string into float RGB channels."""
    if not isinstance(style, str):
        raise ColorStyleError(f"color style must be a string, got {type(style).__name__}")
    text = style.strip().lower()

    m = _FUNCTION_RE.match(text)
    if m:
        color = _parse_function(m.group(1), m.group(2), style)
    else:
        color = QColor(text) if text else QColor()
    if not color.isValid():
        raise ColorStyleError(f"unrecognised color style: {style!r}")
    return (color.red() / 255.0, color.green() / 255.0, color.blue() / 255.0)


def _parse_function(name: str, args: str, style: str) -> QColor:
    parts = [part.strip() for part in args.split(",")]
    if len(parts) not in (3, 4):
        raise ColorStyleError(f"expected 3 or 4 components in {style!r}")
    for part in parts:
        if not _NUMBER_RE.match(part):
            raise ColorStyleError(f"bad component {part!r} in {style!r}")

    if name.startswith("rgb"):
        r, g, b = (_unit(part, 255.0, style) for part in parts[:3])
        return QColor.fromRgbF(r, g, b)

    hue = float(parts[0].removesuffix("deg")) % 360.0
    if not (parts[1].endswith("%") and parts[2].endswith("%")):
        raise ColorStyleError(f"saturation and lightness must be percentages in {style!r}")
    s = _unit(parts[1], 100.0, style)
    lightness = _unit(parts[2], 100.0, style)
    return QColor.fromHslF(hue / 360.0, s, lightness)


def _unit(part: str, scale: float, style: str) -> float:
    if part.endswith("deg"):
        raise ColorStyleError(f"unexpected angle {part!r} in {style!r}")
    if part.endswith("%"):
        value = float(part[:-1]) / 100.0
    else:
        value = float(part) / scale
    if not 0.0 <= value <= 1.0:
        raise ColorStyleError(f"color channel out of range in {style!r}")
    return value


def _to_byte(channel: float) -> int:
    return max(0, min(255, round(channel * 255)))
