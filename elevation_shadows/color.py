"""Color value type used by shadow descriptions."""
from __future__ import annotations

import string

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """An RGB color with a floating point alpha channel."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    red: int = Field(0, ge=0, le=255)
    green: int = Field(0, ge=0, le=255)
    blue: int = Field(0, ge=0, le=255)
    alpha: float = Field(1.0, ge=0.0, le=1.0)

    @property
    def opacity(self) -> float:
        return self.alpha

    def with_opacity(self, opacity: float) -> "Color":
        """Return a copy of this color with its alpha channel replaced.

        Raises ``ValidationError`` when ``opacity`` falls outside [0, 1].
        """

        return type(self).model_validate({**dict(self), "alpha": opacity})

    @classmethod
    def from_argb(cls, value: int) -> "Color":
        """Build a color from a packed ``0xAARRGGBB`` integer."""

        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            alpha=((value >> 24) & 0xFF) / 255.0,
        )

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Parse ``#RGB``, ``#RRGGBB`` or ``#AARRGGBB`` strings.

        Raises ``ValueError`` when the string is not a valid hex color.
        """

        hex_str = hex_color.lstrip("#")
        if not hex_str or any(c not in string.hexdigits for c in hex_str):
            raise ValueError(f"Invalid hex color: {hex_color}")
        if len(hex_str) == 3:
            hex_str = "".join(c * 2 for c in hex_str)
        if len(hex_str) == 6:
            hex_str = "FF" + hex_str
        if len(hex_str) != 8:
            raise ValueError(f"Invalid hex color: {hex_color}")
        return cls.from_argb(int(hex_str, 16))


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between two numbers."""

    return a + (b - a) * t


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Blend two colors channel by channel, alpha included."""

    return Color(
        red=_channel(lerp(a.red, b.red, t)),
        green=_channel(lerp(a.green, b.green, t)),
        blue=_channel(lerp(a.blue, b.blue, t)),
        alpha=max(0.0, min(1.0, lerp(a.alpha, b.alpha, t))),
    )


BLACK = Color()

__all__ = ["BLACK", "Color", "lerp", "lerp_color"]
