"""Textual ``oklch(L C H)`` codec.

The string form is the only one persisted in ``design-system.json`` and
emitted into CSS, so parsing and composing must agree exactly with the
editor's JavaScript copy:

* parse is a soft-fail search: anything that does not contain a
  ``oklch(<num> <num> <num>)`` group yields ``None``;
* compose rounds half-up (``Math.round`` semantics) to 2/3/0 decimals and
  prints numbers in their shortest form (``0.5``, ``250``).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_NUM = r"(\d+(?:\.\d*)?|\.\d+)"

OKLCH_RE = re.compile(
    rf"oklch\s*\(\s*{_NUM}\s+{_NUM}\s+{_NUM}\s*\)", re.IGNORECASE | re.ASCII
)
_OKLCH_FULL_RE = re.compile(
    rf"\s*oklch\s*\(\s*{_NUM}\s+{_NUM}\s+{_NUM}\s*\)\s*", re.IGNORECASE | re.ASCII
)

L_DECIMALS = 2
C_DECIMALS = 3
H_DECIMALS = 0


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round like JavaScript's ``Math.round(x * 10**n) / 10**n``."""
    if ndigits == 0:
        return float(math.floor(x + 0.5))
    scale = 10**ndigits
    return math.floor(x * scale + 0.5) / scale


def format_number(x: float) -> str:
    """Shortest decimal form: ``1.0 -> '1'``, ``0.50 -> '0.5'``, ``-0 -> '0'``."""
    if x == 0:
        return "0"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(float(x))


@dataclass(frozen=True)
class Oklch:
    l: float
    c: float
    h: float

    def rounded(self) -> "Oklch":
        """Apply the serialization precision (idempotent)."""
        return Oklch(
            round_half_up(self.l, L_DECIMALS),
            round_half_up(self.c, C_DECIMALS),
            round_half_up(self.h, H_DECIMALS),
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return self.l, self.c, self.h

    def __str__(self) -> str:
        return compose_oklch(self)


def parse_oklch(value: object) -> Oklch | None:
    if not value or not isinstance(value, str):
        return None
    m = OKLCH_RE.search(value)
    if m is None:
        return None
    l, c, h = (float(g) for g in m.groups())
    return Oklch(l, c, h)


def is_oklch(value: object) -> bool:
    """True when the whole string is one ``oklch(...)`` value."""
    return isinstance(value, str) and _OKLCH_FULL_RE.fullmatch(value) is not None


def compose_oklch(color: Oklch) -> str:
    r = color.rounded()
    return f"oklch({format_number(r.l)} {format_number(r.c)} {format_number(r.h)})"


__all__ = [
    "Oklch",
    "parse_oklch",
    "is_oklch",
    "compose_oklch",
    "format_number",
    "round_half_up",
]
