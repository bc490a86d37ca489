from siteforge_tokens.oklch import Oklch, compose_oklch
from siteforge_tokens.shades import (
    BASE_LEVEL,
    DEFAULT_COLOR,
    SHADE_LEVELS,
    darken,
    generate_shades,
    get_default_color,
    get_shade_levels,
    is_shade_level,
    lighten,
    shade_strings,
)

BASE = "oklch(0.55 0.2 250)"


def test_levels_exclude_base():
    assert get_shade_levels() == [50, 100, 200, 300, 400, 600, 700, 800, 900, 950]
    assert BASE_LEVEL not in SHADE_LEVELS
    assert get_default_color() == DEFAULT_COLOR == BASE


def test_ten_levels_in_order():
    shades = generate_shades(BASE)
    assert list(shades) == list(SHADE_LEVELS)


def test_level_600():
    s600 = generate_shades(BASE)[600]
    assert s600.l == 0.48
    assert s600.c == 0.176
    assert compose_oklch(s600) == "oklch(0.48 0.176 250)"


def test_ramp_ends():
    strings = shade_strings(BASE)
    assert strings["50"] == "oklch(0.97 0.016 250)"
    assert strings["950"] == "oklch(0.16 0.048 250)"
    assert set(strings) == {str(level) for level in SHADE_LEVELS}


def test_hue_is_kept_for_every_level():
    base = Oklch(0.6, 0.15, 31)
    assert all(s.h == base.h for s in generate_shades(base).values())


def test_lightness_is_absolute():
    dark = generate_shades("oklch(0.2 0.1 10)")
    light = generate_shades("oklch(0.9 0.1 10)")
    assert [s.l for s in dark.values()] == [s.l for s in light.values()]


def test_deterministic():
    assert shade_strings(BASE) == shade_strings(BASE)
    assert generate_shades(BASE) == generate_shades(Oklch(0.55, 0.2, 250))


def test_bad_base_gives_empty_mapping():
    assert generate_shades("not a color") == {}
    assert shade_strings("") == {}


def test_lighten_darken_strings():
    assert lighten(BASE) == "oklch(0.65 0.2 250)"
    assert darken(BASE, 0.25) == "oklch(0.3 0.2 250)"
    assert lighten("oklch(0.95 0.1 20)", 0.2) == "oklch(1 0.1 20)"
    assert darken("oklch(0.05 0.1 20)", 0.2) == "oklch(0 0.1 20)"


def test_lighten_keeps_bad_input_and_handles_oklch():
    assert lighten("bogus") == "bogus"
    assert darken(Oklch(0.5, 0.1, 20), -0.1) == Oklch(0.6, 0.1, 20)


def test_is_shade_level():
    assert is_shade_level(50) and is_shade_level("950")
    assert not is_shade_level(500)
    assert not is_shade_level("abc")
    assert not is_shade_level(None)


def test_is_shade_level_is_exact():
    for loose in ("5_0", " 050 ", "050", 50.9, 50.0, True):
        assert not is_shade_level(loose)
