"""design-system.json persistence.

Every successful ``write`` also regenerates ``theme.json`` and the
stylesheet, so the three files never drift apart.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Mapping

from .css import DEFAULT_BREAKPOINTS, generate_css
from .palette import ColorMap, add_color
from .shades import DEFAULT_COLOR
from .theme_json import generate_theme_json

log = logging.getLogger(__name__)

DESIGN_SYSTEM_FILE = "design-system.json"
THEME_JSON_FILE = "theme.json"
CSS_FILE = Path("assets") / "src" / "_design-system.css"

DEFAULT_DESIGN_SYSTEM: Mapping[str, Any] = {
    "version": "1.0.0",
    "breakpoints": dict(DEFAULT_BREAKPOINTS),
    "colors": {},
    "fonts": {},
    "typography": {},
    "spacing": {},
    "radius": {},
    "shadows": {},
    "transitions": {},
}


def default_design_system() -> dict[str, Any]:
    return copy.deepcopy(dict(DEFAULT_DESIGN_SYSTEM))


def _read_json_object(path: Path) -> dict[str, Any] | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as exc:
        log.warning("ignoring unreadable %s: %s", path, exc)
        return None
    if not isinstance(data, dict) or not data:
        return None
    return data


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _dump(data: Any) -> str:
    # same shape as PHP's JSON_PRETTY_PRINT | JSON_UNESCAPED_SLASHES
    return json.dumps(data, indent=4, ensure_ascii=False)


class DesignSystemStore:
    def __init__(self, theme_dir: str | os.PathLike[str]) -> None:
        self.theme_dir = Path(theme_dir)
        self._lock = threading.RLock()

    @property
    def design_system_path(self) -> Path:
        return self.theme_dir / DESIGN_SYSTEM_FILE

    @property
    def theme_json_path(self) -> Path:
        return self.theme_dir / THEME_JSON_FILE

    @property
    def css_path(self) -> Path:
        return self.theme_dir / CSS_FILE

    def read(self) -> dict[str, Any]:
        data = _read_json_object(self.design_system_path)
        return data if data is not None else default_design_system()

    def write(self, data: Mapping[str, Any]) -> None:
        with self._lock:
            _atomic_write_text(self.design_system_path, _dump(data))
            log.debug("wrote %s", self.design_system_path)
            self.sync_theme_json()
            self.generate_css()

    def get_colors(self) -> ColorMap:
        colors = self.read().get("colors")
        return dict(colors) if isinstance(colors, Mapping) else {}

    def save_colors(self, colors: Mapping[str, Any]) -> None:
        with self._lock:
            data = self.read()
            data["colors"] = dict(colors)
            self.write(data)

    def reset_colors(self) -> None:
        self.save_colors({})

    def add_color(
        self, name: str, base: str = DEFAULT_COLOR, *, with_shades: bool = True
    ) -> tuple[str, dict[str, Any]]:
        """Add one color and persist; returns the stored key and entry."""
        with self._lock:
            key, colors = add_color(self.get_colors(), name, base, with_shades=with_shades)
            self.save_colors(colors)
        return key, colors[key]

    def sync_theme_json(self) -> dict[str, Any]:
        existing = _read_json_object(self.theme_json_path) or {}
        theme = generate_theme_json(self.read(), existing)
        _atomic_write_text(self.theme_json_path, _dump(theme))
        log.debug("synced %s", self.theme_json_path)
        return theme

    def generate_css(self) -> str:
        css = generate_css(self.read())
        _atomic_write_text(self.css_path, css)
        log.debug("generated %s (%d bytes)", self.css_path, len(css))
        return css


__all__ = ["DesignSystemStore", "DEFAULT_DESIGN_SYSTEM", "default_design_system"]
