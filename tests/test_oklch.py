import numpy as np
import pytest

from siteforge_tokens.oklch import Oklch, compose_oklch, format_number, is_oklch, parse_oklch


def test_parse_basic():
    assert parse_oklch("oklch(0.55 0.2 250)") == Oklch(0.55, 0.2, 250.0)


def test_parse_is_case_insensitive_and_tolerates_spacing():
    assert parse_oklch("OKLCH ( 0.5   0.1\t12 )") == Oklch(0.5, 0.1, 12.0)


def test_parse_finds_value_inside_text():
    assert parse_oklch("color: oklch(1 0 0);") == Oklch(1.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "bad",
    [
        None,
        "",
        42,
        "oklch(0.5 0.1)",
        "oklch(0.5, 0.1, 20)",
        "oklch(0.5 0.1 -20)",
        "oklch(0.5 0.1 2e2)",
        "rgb(1 2 3)",
        "oklch(. . .)",
    ],
)
def test_parse_soft_fails(bad):
    assert parse_oklch(bad) is None


def test_compose_rounding():
    assert compose_oklch(Oklch(0.5, 0.1, 250)) == "oklch(0.5 0.1 250)"
    assert compose_oklch(Oklch(0.123456, 0.0456789, 249.5)) == "oklch(0.12 0.046 250)"
    assert compose_oklch(Oklch(0.2 * 1, 0.2 * 0.88, 250.0)) == "oklch(0.2 0.176 250)"


def test_compose_rounds_halves_up():
    assert compose_oklch(Oklch(0.5, 0.0, 0.5)) == "oklch(0.5 0 1)"
    assert compose_oklch(Oklch(0.5, 0.0, 1.5)) == "oklch(0.5 0 2)"


def test_compose_never_prints_negative_zero():
    assert compose_oklch(Oklch(-0.001, -0.0001, -0.2)) == "oklch(0 0 0)"


def test_format_number():
    assert format_number(250.0) == "250"
    assert format_number(0.50) == "0.5"
    assert format_number(0.016) == "0.016"
    assert format_number(-0.0) == "0"


def test_str_is_compose():
    assert str(Oklch(0.55, 0.2, 250)) == "oklch(0.55 0.2 250)"


def test_serialization_is_idempotent_over_grid():
    for l in np.linspace(0.0, 1.0, 7):
        for c in np.linspace(0.0, 0.4, 7):
            for h in np.linspace(0.0, 359.0, 9):
                once = parse_oklch(compose_oklch(Oklch(float(l), float(c), float(h))))
                assert once is not None
                assert once == once.rounded()
                assert parse_oklch(compose_oklch(once)) == once
                assert once.l == pytest.approx(l, abs=0.005)
                assert once.c == pytest.approx(c, abs=0.0005)
                assert once.h == pytest.approx(h, abs=0.5)


def test_is_oklch_is_anchored():
    assert is_oklch("oklch(0.5 0.1 20)")
    assert not is_oklch("x oklch(0.5 0.1 20)")
    assert not is_oklch("oklch(0.5 0.1 20); y")
    assert not is_oklch(None)
