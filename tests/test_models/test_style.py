"""Tests for the style model."""

import numpy as np
import pytest

from vectornodes.models.style import Color, Fill, FillType, Gradient, PathStyle, Stroke
from vectornodes.svg.serializer import SvgRender


def test_color_from_hex():
    c = Color.from_hex("#ff8000")
    assert c.r == pytest.approx(1.0)
    assert c.g == pytest.approx(128 / 255)
    assert c.b == 0.0
    assert c.a == 1.0
    assert c.to_rgb_hex() == "ff8000"


def test_color_short_hex_and_alpha():
    assert Color.from_hex("#fff").to_rgb_hex() == "ffffff"
    assert Color.from_hex("00000080").alpha == pytest.approx(128 / 255)


def test_color_invalid_hex():
    with pytest.raises(ValueError):
        Color.from_hex("#12345")


def test_path_style_defaults():
    style = PathStyle()
    assert style.stroke is None
    assert style.fill.kind is FillType.NONE


def test_set_and_clear():
    style = PathStyle()
    style.set_fill(Fill.solid(Color(1, 0, 0)))
    style.set_stroke(Stroke(color=Color(), weight=2.0))
    assert style.fill.kind is FillType.SOLID
    assert style.stroke.weight == 2.0

    style.clear_fill()
    style.clear_stroke()
    assert style == PathStyle()


def test_stroke_render_defaults_omitted():
    attrs = Stroke(color=Color(), weight=1.5).render()
    assert 'stroke-width="1.5"' in attrs
    assert "stroke-linecap" not in attrs
    assert "stroke-miterlimit" not in attrs


def test_stroke_without_color_renders_nothing():
    assert Stroke(weight=3.0).render() == ""


def test_gradient_renders_defs_and_skips_colorless_stops():
    gradient = Gradient(
        start=(0, 0),
        end=(10, 0),
        positions=[(0.0, Color(1, 0, 0)), (0.5, None), (1.0, Color(0, 0, 1))],
    )
    render = SvgRender()
    attrs = Fill.from_gradient(gradient).render(render)

    assert attrs == ' fill="url(#gradient-0)"'
    assert len(render.svg_defs) == 1
    assert render.svg_defs[0].count("<stop") == 2
    assert "linearGradient" in render.svg_defs[0]


def test_gradient_equality():
    a = Gradient(start=np.array([0.0, 0.0]), end=(1, 1), positions=[(0, None)])
    b = Gradient(start=(0, 0), end=np.array([1.0, 1.0]), positions=[(0.0, None)])
    assert a == b
