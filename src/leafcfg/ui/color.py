"""RGBA colors, their ``#RRGGBBAA`` text form, and UI color schemes."""

from __future__ import annotations

import colorsys
import random
import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from leafcfg.errors import FormatError

HEX_COLOR_PATTERN: Final = re.compile(r"#([0-9A-Fa-f]{8})")


class Color(BaseModel):
    """An RGBA color with 8-bit channels."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: int = Field(255, ge=0, le=255)

    def to_hex(self) -> str:
        """Encode as ``#RRGGBBAA`` with uppercase digits.

        Returns:
            Eight hex digits prefixed with ``#``
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Decode a ``#RRGGBBAA`` string (case-insensitive).

        Args:
            text: Color string to decode

        Returns:
            The decoded color

        Raises:
            FormatError: If the string is not ``#`` followed by 8 hex digits
        """
        match = HEX_COLOR_PATTERN.fullmatch(text)
        if match is None:
            raise FormatError(f"expected '#RRGGBBAA', got {text!r}")
        value = int(match.group(1), 16)
        return cls(
            r=(value >> 24) & 0xFF,
            g=(value >> 16) & 0xFF,
            b=(value >> 8) & 0xFF,
            a=value & 0xFF,
        )


def encode_color(color: Color) -> str:
    """Return the ``#RRGGBBAA`` form of a color."""
    return color.to_hex()


def decode_color(text: str) -> Color:
    """Parse a ``#RRGGBBAA`` string into a color."""
    return Color.from_hex(text)


class ColorScheme(BaseModel):
    """The four colors every themed screen is drawn with."""

    background: Color
    base: Color
    base_focus: Color
    text: Color


def _from_hls(hue: float, lightness: float, saturation: float) -> Color:
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return Color(r=round(r * 255), g=round(g * 255), b=round(b * 255), a=255)


def generate_random_scheme(rng: random.Random | None = None) -> ColorScheme:
    """Build a color scheme around a random hue.

    Background, base and focus share the hue at increasing lightness; text is
    white on dark hues and black on light ones.

    Args:
        rng: Random source (default: a freshly seeded generator)

    Returns:
        A fully opaque color scheme
    """
    rng = rng or random.Random()
    hue = rng.random()
    saturation = rng.uniform(0.35, 0.75)
    lightness = rng.uniform(0.2, 0.6)

    base = _from_hls(hue, lightness, saturation)
    # Perceived luminance (ITU-R BT.601)
    luminance = 0.299 * base.r + 0.587 * base.g + 0.114 * base.b
    text = Color(r=0, g=0, b=0) if luminance > 150 else Color(r=255, g=255, b=255)

    return ColorScheme(
        background=_from_hls(hue, max(lightness - 0.15, 0.05), saturation),
        base=base,
        base_focus=_from_hls(hue, min(lightness + 0.12, 0.9), saturation),
        text=text,
    )
