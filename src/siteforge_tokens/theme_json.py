from __future__ import annotations

import copy
from typing import Any, Mapping

THEME_JSON_SCHEMA = "https://schemas.wp.org/trunk/theme.json"
THEME_JSON_VERSION = 2
SPACING_UNITS = ["px", "em", "rem", "vh", "vw", "%"]
HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def _title(slug: str) -> str:
    # PHP ucfirst: only the first character changes
    return slug[:1].upper() + slug[1:]


def color_palette(colors: Mapping[str, Any]) -> list[dict[str, str]]:
    """theme.json palette entries; values point at the generated CSS variables."""
    palette: list[dict[str, str]] = []
    for name, config in colors.items():
        if "base" not in config:
            continue
        title = _title(name)
        palette.append({"slug": name, "color": f"var(--color-{name})", "name": title})
        if config.get("shades") is None:
            continue
        for shade in ["500", *config["shades"]]:
            palette.append(
                {
                    "slug": f"{name}-{shade}",
                    "color": f"var(--color-{name}-{shade})",
                    "name": f"{title} {shade}",
                }
            )
    return palette


def generate_theme_json(
    design_system: Mapping[str, Any], existing: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Merge the design system into a copy of an existing theme.json document."""
    theme: dict[str, Any] = copy.deepcopy(dict(existing or {}))
    theme.setdefault("$schema", THEME_JSON_SCHEMA)
    theme.setdefault("version", THEME_JSON_VERSION)
    settings = theme.setdefault("settings", {})
    color = settings.setdefault("color", {})
    typo = settings.setdefault("typography", {})
    spacing = settings.setdefault("spacing", {})

    colors = design_system.get("colors") or {}
    if colors:
        color["palette"] = color_palette(colors)
        color["defaultPalette"] = False
        color["defaultGradients"] = False
        color["custom"] = True

    fonts = design_system.get("fonts") or {}
    if fonts:
        typo["fontFamilies"] = [
            {"fontFamily": f"var(--font-{name})", "slug": name, "name": _title(name)}
            for name in fonts
        ]

    typography = design_system.get("typography") or {}
    if typography:
        typo["fontSizes"] = [
            {
                "slug": name,
                "size": f"var(--text-{name})",
                "name": _title(name.replace("-", " ")),
                "fluid": False,
            }
            for name in typography
        ]
        typo["customFontSize"] = True

    space = design_system.get("spacing") or {}
    if space:
        spacing["spacingSizes"] = [
            {"slug": name, "size": f"var(--spacing-{name})", "name": name.upper()}
            for name in space
        ]
        spacing["customSpacingSize"] = True
        spacing["units"] = list(SPACING_UNITS)

    styles = theme.setdefault("styles", {})
    styles["color"] = {
        "background": "var(--color-neutral-50)",
        "text": "var(--color-neutral-900)",
    }
    styles["typography"] = {
        "fontFamily": "var(--font-sans)",
        "fontSize": "var(--text-body)",
        "lineHeight": "var(--text-body-line-height)",
    }
    elements = styles.setdefault("elements", {})
    elements["link"] = {
        "color": {"text": "var(--color-primary)"},
        ":hover": {"color": {"text": "var(--color-primary-600)"}},
    }
    for h in HEADINGS:
        if h in typography:
            elements[h] = {
                "typography": {
                    "fontFamily": f"var(--text-{h}-font)",
                    "fontSize": f"var(--text-{h})",
                    "fontWeight": f"var(--text-{h}-weight)",
                    "lineHeight": f"var(--text-{h}-line-height)",
                }
            }
    return theme


__all__ = ["generate_theme_json", "color_palette", "THEME_JSON_SCHEMA"]
