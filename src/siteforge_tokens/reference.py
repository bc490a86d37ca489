# reference.py – independent conversions through ColorAide
#   Used to flag out-of-gamut colors and to cross-check the canonical engine.
#   Never used to produce persisted values: ColorAide derives its OKLab
#   matrices at higher precision, so it can differ from the engine by one
#   step in the last byte.

from __future__ import annotations

import math

from coloraide import Color

from .colorspace import Hex, canon_hex
from .oklch import Oklch

GAMUT = "srgb"


def _ca(color: Oklch) -> Color:
    return Color("oklch", [color.l, color.c, color.h])


def reference_hex(color: Oklch) -> Hex:
    # "clip" clamps each gamma-encoded channel, same as the engine
    return _ca(color).convert(GAMUT).to_string(hex=True, fit="clip")


def reference_oklch(hex_str: str) -> Oklch:
    l, c, h = (float(v) for v in Color(canon_hex(hex_str)).convert("oklch").coords())
    # achromatic colors come back with an undefined (NaN) hue
    return Oklch(l, c, 0.0 if math.isnan(h) else h % 360.0)


def in_srgb_gamut(color: Oklch) -> bool:
    """Whether the color is displayable without clipping."""
    return bool(_ca(color).in_gamut(GAMUT))


__all__ = ["reference_hex", "reference_oklch", "in_srgb_gamut"]
