"""UI package - colors and widget theming."""

from leafcfg.ui.color import Color, ColorScheme, decode_color, encode_color

__all__ = ["Color", "ColorScheme", "decode_color", "encode_color"]
