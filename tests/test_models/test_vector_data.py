"""Tests for VectorData queries and concatenation."""

import numpy as np
import pytest

from vectornodes.models.blending import AlphaBlending, BlendMode
from vectornodes.models.style import Color, Fill, PathStyle
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import identity, scale, translation
from vectornodes.utils.geometry import anchors
from tests.conftest import square_path, triangle_path


def test_default_is_empty():
    vd = VectorData()
    assert vd.subpaths == []
    assert vd.local_bounding_box() is None
    assert vd.bounding_box(identity()) is None


def test_local_bounding_box_ignores_transform(triangle):
    triangle.transform = translation((100, 100))
    np.testing.assert_allclose(triangle.local_bounding_box(), [[0, 0], [4, 3]])


def test_bounding_box_applies_transform(triangle):
    triangle.transform = scale(2.0)
    np.testing.assert_allclose(triangle.bounding_box(translation((1, 1))), [[1, 1], [9, 7]])


def test_concat_appends_paths_and_mirror_angles():
    a = VectorData.from_subpaths([triangle_path()])
    a.mirror_angle = [1]
    b = VectorData.from_subpaths([square_path(), triangle_path()])
    b.mirror_angle = [7, 8]

    a.concat(b, identity())

    assert len(a.subpaths) == 3
    assert a.mirror_angle == [1, 7, 8]


def test_concat_bakes_both_transforms():
    a = VectorData()
    b = VectorData.from_subpath(square_path())
    b.transform = scale(2.0)

    a.concat(b, translation((10, 0)))

    np.testing.assert_allclose(anchors(a.subpaths[0])[2], [14.0, 4.0])
    np.testing.assert_array_equal(a.transform, identity())


def test_concat_last_style_wins():
    a = VectorData.from_subpath(triangle_path())
    a.style = PathStyle(fill=Fill.solid(Color(1, 0, 0)))
    b = VectorData.from_subpath(square_path())
    b.style = PathStyle(fill=Fill.solid(Color(0, 0, 1)))
    b.alpha_blending = AlphaBlending(opacity=0.5, blend_mode=BlendMode.MULTIPLY)

    a.concat(b, identity())

    assert a.style.fill.color == Color(0, 0, 1)
    assert a.alpha_blending == AlphaBlending(opacity=0.5, blend_mode=BlendMode.MULTIPLY)


def test_concat_does_not_alias_other():
    a = VectorData()
    b = VectorData.from_subpath(square_path())

    a.concat(b, identity())
    a.subpaths[0][0].start = 99 + 99j

    assert b.subpaths[0][0].start == 0j


def test_concat_twice_duplicates():
    a = VectorData()
    b = VectorData.from_subpath(square_path())
    a.concat(b, identity())
    a.concat(b, translation((5, 0)))
    assert len(a.subpaths) == 2
    np.testing.assert_allclose(a.local_bounding_box(), [[0, 0], [7, 2]])


@pytest.mark.parametrize("count", [0, 1, 4])
def test_concat_count_property(count):
    a = VectorData.from_subpath(triangle_path())
    b = VectorData.from_subpaths([square_path()] * count)
    b.mirror_angle = list(range(count))
    a.concat(b, identity())
    assert len(a.subpaths) == 1 + count
    assert len(a.mirror_angle) == count


def test_concat_with_itself_doubles():
    vd = VectorData.from_subpath(square_path())
    vd.mirror_angle = [7]
    vd.concat(vd, translation((5, 0)))

    assert len(vd.subpaths) == 2
    assert vd.mirror_angle == [7, 7]
    np.testing.assert_allclose(anchors(vd.subpaths[1])[0], [5, 0])
