# colorspace.py – OKLCH ↔ OKLab ↔ linear sRGB ↔ sRGB ↔ hex
#   - Björn Ottosson's OKLab matrices, 10-digit constants as used by the editor
#   - sRGB companding with gamma 2.4 and IEC thresholds
#   - clamping happens once, at the byte step; everything before stays unbounded
#   - scalar float64 maths so results match the JS copy to the last bit

from __future__ import annotations

import math
import string

from .oklch import Oklch

Hex = str

FALLBACK_HEX: Hex = "#808080"


class InvalidColorFormat(ValueError):
    """Raised for color text that cannot be converted (bad hex, bad oklch)."""


# --- 1) polar <-> cartesian -------------------------------------------------
def oklch_to_oklab(l: float, c: float, h: float) -> tuple[float, float, float]:
    h_rad = (h * math.pi) / 180
    return l, c * math.cos(h_rad), c * math.sin(h_rad)


def oklab_to_oklch(L: float, a: float, b: float) -> tuple[float, float, float]:
    c = math.sqrt(a * a + b * b)
    h = (math.atan2(b, a) * 180) / math.pi
    if h < 0:
        h += 360
    return L, c, h


# --- 2) OKLab <-> linear sRGB -----------------------------------------------
def oklab_to_linear_srgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.291485548 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    return (
        +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.707614701 * s,
    )


def linear_srgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    # math.cbrt keeps the sign for negative (out-of-gamut) inputs
    l_ = math.cbrt(l)
    m_ = math.cbrt(m)
    s_ = math.cbrt(s)

    return (
        0.2104542553 * l_ + 0.793617785 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.428592205 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.808675766 * s_,
    )


# --- 3) IEC 61966-2-1 companding --------------------------------------------
def srgb_to_linear(value: float) -> float:
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1 / 2.4) - 0.055


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _to_byte(value: float) -> int:
    # Math.round() semantics: halves go up
    return math.floor(clamp01(linear_to_srgb(value)) * 255 + 0.5)


# --- 4) hex -----------------------------------------------------------------
def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex, '#' optional."""
    if not isinstance(s, str):
        raise InvalidColorFormat(f"hex must be a string, got {type(s).__name__}")
    raw = s.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise InvalidColorFormat(f"invalid hex: {s!r} (need 3 or 6 hex digits)")
    return "#" + raw.lower()


def oklch_to_linear_srgb(color: Oklch) -> tuple[float, float, float]:
    return oklab_to_linear_srgb(*oklch_to_oklab(color.l, color.c, color.h))


def oklch_to_hex(color: Oklch) -> Hex:
    r, g, b = (_to_byte(v) for v in oklch_to_linear_srgb(color))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_oklch(hex_str: str) -> Oklch:
    """Hex → unrounded OKLCH. Raises InvalidColorFormat for malformed input."""
    raw = canon_hex(hex_str)
    r, g, b = (int(raw[i : i + 2], 16) / 255 for i in (1, 3, 5))
    lab = linear_srgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return Oklch(*oklab_to_oklch(*lab))


__all__ = [
    "InvalidColorFormat",
    "FALLBACK_HEX",
    "oklch_to_oklab",
    "oklab_to_oklch",
    "oklab_to_linear_srgb",
    "linear_srgb_to_oklab",
    "srgb_to_linear",
    "linear_to_srgb",
    "clamp01",
    "canon_hex",
    "oklch_to_linear_srgb",
    "oklch_to_hex",
    "hex_to_oklch",
]
