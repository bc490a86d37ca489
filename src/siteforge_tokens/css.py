"""Stylesheet generation from a design-system document.

Output has four parts, in order: Google Fonts ``@import`` (when any font
declares a ``google`` family spec), ``:root`` custom properties, a Tailwind 4
``@theme`` block, and ``.text-*`` typography utilities.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Mapping

from .oklch import format_number

DEFAULT_BREAKPOINTS = {"sm": "375px", "lg": "1024px", "xl": "1536px"}
ROOT_FONT_PX = 16

_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)(rem|px)$")
_LEADING_NUM_RE = re.compile(r"\s*(\d+(?:\.\d+)?|\.\d+)")

DesignSystem = Mapping[str, Any]


def _leading_float(value: str) -> float:
    m = _LEADING_NUM_RE.match(str(value))
    return float(m.group(1)) if m else 0.0


def parse_size(value: str) -> float:
    """CSS size → rem (px divided by 16)."""
    m = _SIZE_RE.match(str(value))
    if m:
        num = float(m.group(1))
        return num / ROOT_FONT_PX if m.group(2) == "px" else num
    return _leading_float(value)


def parse_breakpoint(value: str) -> float:
    """CSS length → px (rem multiplied by 16)."""
    m = _SIZE_RE.match(str(value))
    if m:
        num = float(m.group(1))
        return num * ROOT_FONT_PX if m.group(2) == "rem" else num
    return _leading_float(value)


def fluid_clamp(min_size: float, max_size: float, min_vw: float, max_vw: float) -> str:
    """
    ``clamp()`` growing linearly from ``min_size`` at ``min_vw`` to
    ``max_size`` at ``max_vw`` (sizes in rem, viewports in px).
    """
    if max_vw == min_vw:
        return f"{format_number(max_size)}rem"
    slope = (max_size - min_size) / ((max_vw - min_vw) / ROOT_FONT_PX)
    intercept = min_size - slope * (min_vw / ROOT_FONT_PX)
    preferred = f"{intercept:.4f}rem + {slope * 100:.4f}vw"
    return f"clamp({format_number(min_size)}rem, {preferred}, {format_number(max_size)}rem)"


def font_family(config: Mapping[str, Any]) -> str:
    family = config.get("family", "")
    if isinstance(family, (list, tuple)):
        return ", ".join(family)
    return str(family)


def google_fonts_url(design_system: DesignSystem) -> str | None:
    specs = [f["google"] for f in (design_system.get("fonts") or {}).values() if f.get("google")]
    if not specs:
        return None
    return "https://fonts.googleapis.com/css2?" + "&".join(f"family={s}" for s in specs) + "&display=swap"


def color_properties(colors: Mapping[str, Any]) -> Iterator[str]:
    """``--color-*`` declarations; shaded colors also get a ``-500`` alias."""
    for name, config in colors.items():
        if "base" not in config:
            continue
        yield f"--color-{name}: {config['base']};"
        if config.get("shades") is not None:
            yield f"--color-{name}-500: {config['base']};"
            for shade, value in config["shades"].items():
                yield f"--color-{name}-{shade}: {value};"


def _section(lines: list[str], title: str, decls: list[str]) -> None:
    if not decls:
        return
    lines.append(f"  /* {title} */")
    lines.extend(f"  {d}" for d in decls)
    lines.append("")


def _simple(design_system: DesignSystem, key: str, prefix: str) -> list[str]:
    return [f"--{prefix}-{name}: {value};" for name, value in (design_system.get(key) or {}).items()]


def css_variables(design_system: DesignSystem) -> str:
    breakpoints = {**DEFAULT_BREAKPOINTS, **(design_system.get("breakpoints") or {})}
    sm_vw, lg_vw, xl_vw = (parse_breakpoint(breakpoints[k]) for k in ("sm", "lg", "xl"))
    fonts = design_system.get("fonts") or {}
    typography = design_system.get("typography") or {}

    lines = [":root {"]
    _section(lines, "Colors", list(color_properties(design_system.get("colors") or {})))
    _section(lines, "Fonts", [f"--font-{n}: {font_family(c)};" for n, c in fonts.items()])

    if typography:
        static: list[str] = []
        for name, t in typography.items():
            static += [f"--text-{name}-{bp}: {t[bp]};" for bp in ("sm", "lg", "xl")]
            if "lineHeight" in t:
                static.append(f"--text-{name}-line-height: {t['lineHeight']};")
            if "letterSpacing" in t:
                static.append(f"--text-{name}-letter-spacing: {t['letterSpacing']};")
            if "weight" in t:
                static.append(f"--text-{name}-weight: {t['weight']};")
            if "font" in t and t["font"] in fonts:
                static.append(f"--text-{name}-font: {font_family(fonts[t['font']])};")
        _section(lines, "Typography - Static Sizes", static)
        _section(
            lines,
            "Typography - Fluid (clamp sm->lg)",
            [
                f"--text-{n}: {fluid_clamp(parse_size(t['sm']), parse_size(t['lg']), sm_vw, lg_vw)};"
                for n, t in typography.items()
            ],
        )
        _section(
            lines,
            "Typography - Fluid Large (clamp lg->xl)",
            [
                f"--text-{n}-fluid-xl: {fluid_clamp(parse_size(t['lg']), parse_size(t['xl']), lg_vw, xl_vw)};"
                for n, t in typography.items()
            ],
        )

    _section(lines, "Spacing", _simple(design_system, "spacing", "spacing"))
    _section(lines, "Border Radius", _simple(design_system, "radius", "radius"))
    _section(lines, "Shadows", _simple(design_system, "shadows", "shadow"))
    _section(lines, "Transitions", _simple(design_system, "transitions", "transition"))
    lines.append("}")
    return "\n".join(lines)


def tailwind_theme(design_system: DesignSystem) -> str:
    decls = list(color_properties(design_system.get("colors") or {}))
    decls += [f"--font-{n}: {font_family(c)};" for n, c in (design_system.get("fonts") or {}).items()]
    decls += _simple(design_system, "spacing", "spacing")
    decls += _simple(design_system, "radius", "radius")
    return "\n".join(["@theme {", *(f"  {d}" for d in decls), "}"])


def typography_utilities(design_system: DesignSystem) -> str:
    typography = design_system.get("typography") or {}
    if not typography:
        return ""
    lines = ["/* Typography Utility Classes */", "@layer utilities {"]
    for name, t in typography.items():
        lines.append(f"  .text-{name} {{")
        lines.append(f"    font-size: var(--text-{name});")
        if "lineHeight" in t:
            lines.append(f"    line-height: var(--text-{name}-line-height);")
        if "letterSpacing" in t:
            lines.append(f"    letter-spacing: var(--text-{name}-letter-spacing);")
        if "weight" in t:
            lines.append(f"    font-weight: var(--text-{name}-weight);")
        if "font" in t:
            lines.append(f"    font-family: var(--text-{name}-font);")
        lines.append("  }")
        lines.append("")
    lines.append("}")
    return "\n".join(lines)


def generate_css(design_system: DesignSystem) -> str:
    lines: list[str] = []
    url = google_fonts_url(design_system)
    if url:
        lines += [f"@import url('{url}');", ""]
    lines += [css_variables(design_system), ""]
    lines += [tailwind_theme(design_system), ""]
    lines.append(typography_utilities(design_system))
    return "\n".join(lines)


__all__ = [
    "generate_css",
    "css_variables",
    "tailwind_theme",
    "typography_utilities",
    "google_fonts_url",
    "color_properties",
    "fluid_clamp",
    "parse_size",
    "parse_breakpoint",
]
