from siteforge_tokens.css import (
    color_properties,
    fluid_clamp,
    generate_css,
    google_fonts_url,
    parse_breakpoint,
    parse_size,
)
from siteforge_tokens.shades import shade_strings

BLUE = "oklch(0.55 0.2 250)"

DESIGN = {
    "breakpoints": {"sm": "320px", "lg": "960px", "xl": "1600px"},
    "colors": {
        "primary": {"base": BLUE, "shades": shade_strings(BLUE)},
        "white": {"base": "oklch(1 0 0)"},
    },
    "fonts": {
        "sans": {"family": ["Inter", "sans-serif"], "google": "Inter:wght@400;700"},
        "mono": {"family": "monospace"},
    },
    "typography": {
        "body": {"sm": "1rem", "lg": "32px", "xl": "2.5rem", "lineHeight": "1.5", "font": "sans"},
    },
    "spacing": {"md": "1rem"},
    "radius": {"sm": "4px"},
    "shadows": {"lg": "0 4px 8px rgba(0,0,0,.1)"},
    "transitions": {"fast": "150ms ease"},
}


def test_parse_units():
    assert parse_size("24px") == 1.5
    assert parse_size("1.25rem") == 1.25
    assert parse_size("2em") == 2.0
    assert parse_size("abc") == 0.0
    assert parse_breakpoint("64rem") == 1024.0
    assert parse_breakpoint("375px") == 375.0


def test_fluid_clamp():
    assert fluid_clamp(1.0, 2.0, 320, 960) == "clamp(1rem, 0.5000rem + 2.5000vw, 2rem)"
    assert fluid_clamp(1.0, 2.0, 960, 960) == "2rem"


def test_color_properties_with_and_without_shades():
    props = list(color_properties(DESIGN["colors"]))
    assert props[0] == f"--color-primary: {BLUE};"
    assert props[1] == f"--color-primary-500: {BLUE};"
    assert props[2] == "--color-primary-50: oklch(0.97 0.016 250);"
    assert props[-1] == "--color-white: oklch(1 0 0);"
    assert len(props) == 2 + 10 + 1


def test_google_fonts_url():
    assert google_fonts_url(DESIGN) == (
        "https://fonts.googleapis.com/css2?family=Inter:wght@400;700&display=swap"
    )
    assert google_fonts_url({"fonts": {"mono": {"family": "monospace"}}}) is None


def test_generate_css_sections():
    css = generate_css(DESIGN)
    assert css.startswith("@import url('https://fonts.googleapis.com/css2?")
    assert "  --font-sans: Inter, sans-serif;" in css
    assert "  --text-body-sm: 1rem;" in css
    assert "  --text-body-font: Inter, sans-serif;" in css
    assert "  --text-body: clamp(1rem, 0.5000rem + 2.5000vw, 2rem);" in css
    assert "  --text-body-fluid-xl:" in css
    assert "  --spacing-md: 1rem;" in css
    assert "  --radius-sm: 4px;" in css
    assert "  --shadow-lg: 0 4px 8px rgba(0,0,0,.1);" in css
    assert "  --transition-fast: 150ms ease;" in css
    assert "@theme {" in css
    assert "  .text-body {" in css
    assert "    line-height: var(--text-body-line-height);" in css
    assert "    font-weight" not in css


def test_theme_block_repeats_colors():
    css = generate_css(DESIGN)
    root, theme = css.split("@theme {")
    assert root.count("--color-primary-950:") == 1
    assert theme.count("--color-primary-950:") == 1
    assert "--shadow-lg" not in theme


def test_empty_design_system():
    css = generate_css({})
    assert ":root {\n}" in css
    assert "@theme {\n}" in css
    assert "@import" not in css
    assert "@layer" not in css
