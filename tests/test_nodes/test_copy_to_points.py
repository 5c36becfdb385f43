"""Tests for CopyToPoints."""

import asyncio

import numpy as np
import pytest

from vectornodes.engine.executor import Executor
from vectornodes.engine.footprint import Footprint
from vectornodes.engine.node import FootprintNode, ValueNode
from vectornodes.models.graphic_group import GraphicGroup, ImageFrame
from vectornodes.models.style import Color, Fill, PathStyle
from vectornodes.models.vector_data import VectorData
from vectornodes.nodes.copy_to_points import CopyToPoints, copy_to_points
from vectornodes.nodes.repeat import repeat
from vectornodes.utils.affine import identity, scale, translation
from vectornodes.utils.geometry import bbox_center, path_bbox
from tests.conftest import ZIGZAG, square_path, triangle_path, zigzag_path


def _points() -> VectorData:
    return VectorData.from_subpath(zigzag_path())


def test_instances_centered_on_anchors():
    instance = VectorData.from_subpath(triangle_path())
    out = copy_to_points(_points(), instance)

    assert len(out.subpaths) == len(ZIGZAG)
    for path, anchor in zip(out.subpaths, ZIGZAG):
        np.testing.assert_allclose(bbox_center(path_bbox(path)), [anchor.real, anchor.imag], atol=1e-12)


def test_points_transform_is_applied():
    points = _points()
    points.transform = translation((100, 0)) @ scale(2.0)
    out = copy_to_points(points, VectorData.from_subpath(square_path()))

    centers = [bbox_center(path_bbox(p)) for p in out.subpaths]
    expected = [[100 + 2 * a.real, 2 * a.imag] for a in ZIGZAG]
    np.testing.assert_allclose(centers, expected, atol=1e-12)


def test_instance_transform_is_respected():
    instance = VectorData.from_subpath(square_path())
    instance.transform = scale(3.0)
    out = copy_to_points(_points(), instance)

    first = path_bbox(out.subpaths[0])
    np.testing.assert_allclose(first[1] - first[0], [6.0, 6.0])
    np.testing.assert_allclose(bbox_center(first), [0.0, 0.0], atol=1e-12)


def test_anchor_order_across_paths():
    points = VectorData.from_subpaths([zigzag_path(), triangle_path()])
    out = copy_to_points(points, VectorData.from_subpath(square_path()))
    centers = [tuple(np.round(bbox_center(path_bbox(p)), 9)) for p in out.subpaths]
    assert centers == [(0, 0), (3, 4), (6, 0), (9, 4), (0, 0), (4, 0), (4, 3)]


def test_empty_points_give_default_value():
    instance = VectorData.from_subpath(square_path())
    out = copy_to_points(VectorData(), instance)
    assert out == VectorData()


def test_instance_without_box_uses_zero_offset():
    out = copy_to_points(_points(), GraphicGroup())
    assert isinstance(out, GraphicGroup)
    assert len(out) == 0


def test_style_taken_from_instance():
    instance = VectorData.from_subpath(square_path())
    instance.style = PathStyle(fill=Fill.solid(Color(0, 0, 1)))
    out = copy_to_points(_points(), instance)
    assert out.style.fill.color == Color(0, 0, 1)


def test_group_instances():
    child = VectorData.from_subpath(square_path())
    frame = ImageFrame(image=np.zeros((1, 1, 4), dtype=np.uint8), transform=translation((2, 2)))
    instance = GraphicGroup(elements=[child, frame])

    out = copy_to_points(_points(), instance)

    assert isinstance(out, GraphicGroup)
    assert len(out) == 2 * len(ZIGZAG)
    # Group box spans (0,0)-(3,3), so its center (1.5, 1.5) is moved onto each anchor
    np.testing.assert_allclose(out[0].transform, translation((-1.5, -1.5)))
    np.testing.assert_allclose(out[3].transform, translation((1.5, 2.5)) @ translation((2, 2)))


def test_node_evaluates_both_upstreams_with_same_footprint(footprint):
    seen = []

    def points_for(fp: Footprint) -> VectorData:
        seen.append(("points", fp))
        return _points()

    async def instance_for(fp: Footprint) -> VectorData:
        await asyncio.sleep(0)
        seen.append(("instance", fp))
        return VectorData.from_subpath(square_path())

    node = CopyToPoints(FootprintNode(points_for), FootprintNode(instance_for))
    out = asyncio.run(node.eval(footprint))

    assert len(out.subpaths) == len(ZIGZAG)
    assert sorted(tag for tag, _ in seen) == ["instance", "points"]
    assert all(fp is footprint for _, fp in seen)


def test_node_composes_with_fn_nodes():
    points = repeat.node(ValueNode(_points()), direction=(0, 10), count=2)
    node = CopyToPoints(points, ValueNode(VectorData.from_subpath(triangle_path())))
    out = Executor().run(node)
    assert len(out.subpaths) == 2 * len(ZIGZAG)


def test_concurrent_evaluations_do_not_share_state():
    instance = ValueNode(VectorData.from_subpath(square_path()))
    node = CopyToPoints(ValueNode(_points()), instance)

    async def both():
        return await asyncio.gather(node.eval(Footprint()), node.eval(Footprint(transform=scale(2.0))))

    first, second = asyncio.run(both())
    assert first == second
    assert first.subpaths[0] is not second.subpaths[0]
    assert instance.value == VectorData.from_subpath(square_path())


def test_failed_upstream_propagates():
    def broken(fp: Footprint) -> VectorData:
        raise ValueError("upstream broke")

    node = CopyToPoints(FootprintNode(broken), ValueNode(VectorData()))
    with pytest.raises(ValueError, match="upstream broke"):
        asyncio.run(node.eval(Footprint()))


def test_identity_concat_matches_copy_count():
    acc = VectorData()
    acc.concat(VectorData.from_subpath(square_path()), identity())
    assert len(acc.subpaths) == 1
