from __future__ import annotations

from typing import Mapping

from .oklch import Oklch, compose_oklch, parse_oklch

ShadeLevel = int

SHADE_LEVELS: tuple[ShadeLevel, ...] = (50, 100, 200, 300, 400, 600, 700, 800, 900, 950)
BASE_LEVEL: ShadeLevel = 500  # the base color itself, never stored in shades

DEFAULT_COLOR = "oklch(0.55 0.2 250)"

# Absolute lightness per level; light end first.
LIGHTNESS: Mapping[ShadeLevel, float] = {
    50: 0.97,
    100: 0.93,
    200: 0.87,
    300: 0.77,
    400: 0.66,
    600: 0.48,
    700: 0.40,
    800: 0.32,
    900: 0.24,
    950: 0.16,
}

# Relative to base chroma; the ends are desaturated, 600 stays close to base.
CHROMA_MULTIPLIER: Mapping[ShadeLevel, float] = {
    50: 0.08,
    100: 0.16,
    200: 0.32,
    300: 0.56,
    400: 0.80,
    600: 0.88,
    700: 0.72,
    800: 0.56,
    900: 0.40,
    950: 0.24,
}

_LEVEL_KEYS = frozenset(str(level) for level in SHADE_LEVELS)


def get_shade_levels() -> list[ShadeLevel]:
    return list(SHADE_LEVELS)


def get_default_color() -> str:
    return DEFAULT_COLOR


def is_shade_level(value: object) -> bool:
    """Accept ints and their exact decimal string form ("50", "950")."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value in LIGHTNESS
    return isinstance(value, str) and value in _LEVEL_KEYS


def _as_color(base: Oklch | str) -> Oklch | None:
    if isinstance(base, Oklch):
        return base
    return parse_oklch(base)


def generate_shades(base: Oklch | str) -> dict[ShadeLevel, Oklch]:
    """
    Derive the 10-level ramp from one base color.

    Lightness is replaced, chroma scaled, hue kept. Each shade is rounded to
    the serialization precision so that the Oklch values are exactly what a
    later parse of the persisted string gives back. An unparseable base
    yields an empty mapping.
    """
    color = _as_color(base)
    if color is None:
        return {}
    return {
        level: Oklch(LIGHTNESS[level], color.c * CHROMA_MULTIPLIER[level], color.h).rounded()
        for level in SHADE_LEVELS
    }


def shade_strings(base: Oklch | str) -> dict[str, str]:
    """Persisted form: decimal level keys, ``oklch(...)`` values."""
    return {str(level): compose_oklch(c) for level, c in generate_shades(base).items()}


def _shift(color: Oklch | str, delta: float) -> Oklch | str:
    parsed = _as_color(color)
    if parsed is None:
        return color
    shifted = Oklch(max(0.0, min(1.0, parsed.l + delta)), parsed.c, parsed.h)
    if isinstance(color, str):
        return compose_oklch(shifted)
    return shifted


def lighten(color: Oklch | str, amount: float = 0.1) -> Oklch | str:
    """Raise lightness by ``amount`` (clamped to 1); strings in, strings out."""
    return _shift(color, amount)


def darken(color: Oklch | str, amount: float = 0.1) -> Oklch | str:
    return _shift(color, -amount)


__all__ = [
    "SHADE_LEVELS",
    "BASE_LEVEL",
    "DEFAULT_COLOR",
    "LIGHTNESS",
    "CHROMA_MULTIPLIER",
    "get_shade_levels",
    "get_default_color",
    "is_shade_level",
    "generate_shades",
    "shade_strings",
    "lighten",
    "darken",
]
