"""Shared test vectors.

The editor runs its own (JavaScript) copy of the color engine for live
preview. Both copies must produce the same strings, so the Python engine
writes a vector file that the other runtime's tests replay:

$ python -m siteforge_tokens.vectors color-vectors.json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import numpy as np

from .colorspace import hex_to_oklch, oklch_to_hex
from .oklch import Oklch, compose_oklch
from .reference import in_srgb_gamut
from .shades import shade_strings

log = logging.getLogger(__name__)

HEX_SAMPLES: Sequence[str] = (
    "#000000",
    "#ffffff",
    "#ff0000",
    "#00ff00",
    "#0000ff",
    "#808080",
    "#fa7a76",
    "#005457",
    "#f0f",
    "abc",
)


def oklch_grid(l_steps: int = 11, c_steps: int = 5, h_steps: int = 12) -> list[Oklch]:
    """Rounded OKLCH samples: l in [0,1], c in [0,0.4], h in [0,360)."""
    ls = np.linspace(0.0, 1.0, max(2, int(l_steps)))
    cs = np.linspace(0.0, 0.4, max(2, int(c_steps)))
    hs = np.linspace(0.0, 360.0, max(1, int(h_steps)), endpoint=False)
    grid = np.stack(np.meshgrid(ls, cs, hs, indexing="ij"), axis=-1).reshape(-1, 3)
    return [Oklch(float(l), float(c), float(h)).rounded() for l, c, h in grid]


def build_vectors(
    l_steps: int = 11, c_steps: int = 5, h_steps: int = 12
) -> dict[str, list[dict[str, Any]]]:
    """oklch → hex/shades records over a grid, plus hex → oklch records."""
    forward = []
    # grid colors are already rounded, so they equal parse(compose(color))
    for color in oklch_grid(l_steps, c_steps, h_steps):
        forward.append(
            {
                "oklch": compose_oklch(color),
                "hex": oklch_to_hex(color),
                "in_gamut": in_srgb_gamut(color),
                "shades": shade_strings(color),
            }
        )
    backward = [{"hex": h, "oklch": compose_oklch(hex_to_oklch(h))} for h in HEX_SAMPLES]
    log.info("built %d oklch and %d hex vectors", len(forward), len(backward))
    return {"oklch_to_hex": forward, "hex_to_oklch": backward}


def write_vectors(path: str | Path, **grid: int) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(build_vectors(**grid), indent=2) + "\n", encoding="utf-8")
    return out


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    target = write_vectors(sys.argv[1] if len(sys.argv) > 1 else "color-vectors.json")
    log.info("wrote %s", target)
