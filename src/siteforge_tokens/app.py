from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, request

# Project-local engine
from .colorspace import InvalidColorFormat, hex_to_oklch, oklch_to_hex
from .oklch import compose_oklch, parse_oklch
from .palette import InvalidColorName, sanitize_colors
from .reference import in_srgb_gamut
from .shades import DEFAULT_COLOR, shade_strings
from .store import DesignSystemStore

log = logging.getLogger(__name__)


def _store() -> DesignSystemStore:
    return current_app.extensions["siteforge_store"]


def _json_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _error(message: str, status: int):
    return jsonify({"error": message}), status


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(THEME_DIR=os.getcwd())
    app.config.from_prefixed_env("SITEFORGE")
    if config:
        app.config.from_mapping(config)
    app.extensions["siteforge_store"] = DesignSystemStore(app.config["THEME_DIR"])

    @app.route("/convert")
    def convert():
        hex_arg = request.args.get("hex")
        oklch_arg = request.args.get("oklch")
        if hex_arg:
            try:
                color = hex_to_oklch(hex_arg)
            except InvalidColorFormat as e:
                return _error(f"invalid color: {e}", 400)
        elif oklch_arg:
            color = parse_oklch(oklch_arg)
            if color is None:
                return _error(f"invalid color: {oklch_arg!r}", 400)
        else:
            return _error("pass either 'hex' or 'oklch'", 400)

        text = compose_oklch(color)
        stored = parse_oklch(text)
        return jsonify(
            {"oklch": text, "hex": oklch_to_hex(stored), "in_gamut": in_srgb_gamut(stored)}
        )

    @app.route("/design-system/generate-shades", methods=["POST"])
    def generate_shades():
        base = _json_body().get("base")
        if not base:
            return _error("missing base color", 400)
        shades = shade_strings(base)
        if not shades:
            return _error(f"invalid base color: {base!r}", 400)
        return jsonify({"shades": shades})

    @app.route("/design-system")
    def design_system():
        return jsonify(_store().read())

    @app.route("/design-system/colors")
    def get_colors():
        return jsonify({"colors": _store().get_colors()})

    @app.route("/design-system/colors", methods=["POST"])
    def save_colors():
        colors = _json_body().get("colors") or {}
        if not isinstance(colors, dict):
            return _error("colors must be an object", 400)
        cleaned = sanitize_colors(colors)
        try:
            _store().save_colors(cleaned)
        except OSError:
            log.exception("Saving colors failed")
            return _error("could not save colors", 500)
        return jsonify({"colors": cleaned})

    @app.route("/design-system/colors/add", methods=["POST"])
    def add_color():
        body = _json_body()
        name = body.get("name")
        if not name or not isinstance(name, str):
            return _error("name is required", 400)
        with_shades = body.get("with_shades", True)
        if not isinstance(with_shades, bool):
            return _error("with_shades must be a boolean", 400)
        try:
            key, entry = _store().add_color(
                name,
                body.get("base") or DEFAULT_COLOR,
                with_shades=with_shades,
            )
        except (InvalidColorName, InvalidColorFormat) as e:
            return _error(str(e), 400)
        except OSError:
            log.exception("Adding color %r failed", name)
            return _error("could not save colors", 500)
        return jsonify({"name": key, "color": entry}), 201

    @app.route("/design-system/reset-colors", methods=["POST"])
    def reset_colors():
        try:
            _store().reset_colors()
        except OSError:
            log.exception("Resetting colors failed")
            return _error("could not reset colors", 500)
        return jsonify({"colors": {}})

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
