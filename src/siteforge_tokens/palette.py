"""Color map editing.

The design-system document stores colors as::

    {"primary": {"base": "oklch(0.55 0.2 250)", "shades": {"50": "...", ...}}}

Every function here takes such a map and returns a new one; the input is
never mutated and key order is kept (a renamed color keeps its slot).
Name handling always runs sanitize -> validate -> uniqueness, in that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .colorspace import InvalidColorFormat
from .names import sanitize_color_name, should_have_shades, validate_color_name
from .oklch import Oklch, compose_oklch, is_oklch, parse_oklch
from .shades import DEFAULT_COLOR, SHADE_LEVELS, is_shade_level, shade_strings

log = logging.getLogger(__name__)

ColorMap = dict[str, dict[str, Any]]


class InvalidColorName(ValueError):
    """Name rejected by validation or already taken; message is user-facing."""


class UnknownColor(KeyError):
    pass


@dataclass(frozen=True)
class ColorEntry:
    name: str
    base: Oklch
    shades: Mapping[int, Oklch] | None = None

    @classmethod
    def from_document(cls, name: str, data: Mapping[str, Any]) -> "ColorEntry":
        base = parse_oklch(data.get("base"))
        if base is None:
            raise InvalidColorFormat(f"color {name!r}: invalid base {data.get('base')!r}")
        shades = None
        raw_shades = data.get("shades")
        if raw_shades is not None:
            shades = {}
            for level, value in raw_shades.items():
                parsed = parse_oklch(value)
                if not is_shade_level(level) or parsed is None:
                    raise InvalidColorFormat(f"color {name!r}: invalid shade {level!r}")
                shades[int(level)] = parsed
            if set(shades) != set(SHADE_LEVELS):
                raise InvalidColorFormat(f"color {name!r}: shades must hold all levels")
        return cls(name, base, shades)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"base": compose_oklch(self.base)}
        if self.shades is not None:
            doc["shades"] = {
                str(level): compose_oklch(self.shades[level]) for level in SHADE_LEVELS
            }
        return doc


def _require_oklch(value: Any) -> str:
    # the whole string must be one oklch(...) value; it lands verbatim in CSS
    if not is_oklch(value):
        raise InvalidColorFormat(f"invalid oklch color: {value!r}")
    return value.strip()


def _require(colors: Mapping[str, Any], name: str) -> dict[str, Any]:
    if name not in colors:
        raise UnknownColor(name)
    return dict(colors[name])


def _checked_name(colors: Mapping[str, Any], raw: str, *, current: str | None = None) -> str:
    name = sanitize_color_name(raw)
    if not validate_color_name(name):
        raise InvalidColorName(
            "Name must start with a letter and contain only letters, digits and hyphens."
        )
    if name != current and name in colors:
        raise InvalidColorName(f"A color named {name!r} already exists.")
    return name


def add_color(
    colors: Mapping[str, Any],
    raw_name: str,
    base: str = DEFAULT_COLOR,
    *,
    with_shades: bool = True,
) -> tuple[str, ColorMap]:
    name = _checked_name(colors, raw_name)
    base = _require_oklch(base)
    entry: dict[str, Any] = {"base": base}
    if with_shades and should_have_shades(name):
        entry["shades"] = shade_strings(base)
    log.debug("add color %s (%s, shades=%s)", name, base, "shades" in entry)
    return name, {**colors, name: entry}


def rename_color(colors: Mapping[str, Any], old: str, new: str) -> tuple[str, ColorMap]:
    _require(colors, old)
    name = _checked_name(colors, new, current=old)
    if name == old:
        return old, dict(colors)
    return name, {(name if key == old else key): value for key, value in colors.items()}


def delete_color(colors: Mapping[str, Any], name: str) -> ColorMap:
    _require(colors, name)
    return {key: value for key, value in colors.items() if key != name}


def update_base(colors: Mapping[str, Any], name: str, base: str) -> ColorMap:
    entry = _require(colors, name)
    entry["base"] = _require_oklch(base)
    if entry.get("shades") and should_have_shades(name):
        entry["shades"] = shade_strings(entry["base"])
    return {**colors, name: entry}


def update_shade(colors: Mapping[str, Any], name: str, level: int | str, value: str) -> ColorMap:
    entry = _require(colors, name)
    if not entry.get("shades"):
        raise InvalidColorFormat(f"color {name!r} has no shades")
    if not is_shade_level(level):
        raise InvalidColorFormat(f"invalid shade level: {level!r}")
    entry["shades"] = {**entry["shades"], str(int(level)): _require_oklch(value)}
    return {**colors, name: entry}


def regenerate_shades(colors: Mapping[str, Any], name: str) -> ColorMap:
    entry = _require(colors, name)
    entry["shades"] = shade_strings(entry["base"])
    return {**colors, name: entry}


def toggle_shades(colors: Mapping[str, Any], name: str) -> ColorMap:
    entry = _require(colors, name)
    if entry.get("shades"):
        del entry["shades"]
    else:
        entry["shades"] = shade_strings(entry["base"])
    return {**colors, name: entry}


def sanitize_colors(raw: Mapping[str, Any]) -> ColorMap:
    """
    Save-time cleanup of an untrusted color map.

    Names are sanitized, entries whose base is not a whole ``oklch(...)``
    string are dropped, bad shade keys/values are dropped, and an
    incomplete shade map is filled in from the base so that stored shades
    always cover every level.
    """
    out: ColorMap = {}
    for raw_name, config in raw.items():
        name = sanitize_color_name(str(raw_name))
        if not isinstance(config, Mapping) or not is_oklch(config.get("base")):
            log.warning("dropping color %r: missing or invalid base", raw_name)
            continue
        if name in out:
            log.warning("color %r overrides earlier entry %r", raw_name, name)
        base = config["base"].strip()
        entry: dict[str, Any] = {"base": base}

        raw_shades = config.get("shades")
        if isinstance(raw_shades, Mapping):
            valid = {
                str(int(level)): value.strip()
                for level, value in raw_shades.items()
                if is_shade_level(level) and is_oklch(value)
            }
            if valid:
                generated = shade_strings(base)
                entry["shades"] = {
                    key: valid.get(key, generated[key]) for key in map(str, SHADE_LEVELS)
                }
        out[name] = entry
    return out


__all__ = [
    "ColorEntry",
    "ColorMap",
    "InvalidColorName",
    "UnknownColor",
    "add_color",
    "rename_color",
    "delete_color",
    "update_base",
    "update_shade",
    "regenerate_shades",
    "toggle_shades",
    "sanitize_colors",
]
