from __future__ import annotations

import re

DEFAULT_NAME = "color"

# Utility/semantic colors that stay flat.
NO_SHADE_NAMES = frozenset({"success", "warning", "error", "black", "white"})

_NAME_RE = re.compile(r"[a-z][a-z0-9-]*")
_SEPARATORS_RE = re.compile(r"[\s_]+")
_INVALID_RE = re.compile(r"[^a-z0-9-]")
_LEADING_RE = re.compile(r"^[^a-z]+")
_TRAILING_RE = re.compile(r"-+$")


def sanitize_color_name(raw: str) -> str:
    """
    Turn free text into a color key: lowercase, whitespace/underscore runs
    become one hyphen, anything outside [a-z0-9-] dropped, leading
    non-letters and trailing hyphens stripped. Never empty.
    """
    name = raw.lower()
    name = _SEPARATORS_RE.sub("-", name)
    name = _INVALID_RE.sub("", name)
    name = _LEADING_RE.sub("", name)
    name = _TRAILING_RE.sub("", name)
    return name or DEFAULT_NAME


def validate_color_name(name: str) -> bool:
    return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None


def should_have_shades(name: str) -> bool:
    return name not in NO_SHADE_NAMES


__all__ = [
    "DEFAULT_NAME",
    "NO_SHADE_NAMES",
    "sanitize_color_name",
    "validate_color_name",
    "should_have_shades",
]
