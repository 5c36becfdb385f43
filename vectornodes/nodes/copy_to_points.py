"""CopyToPoints: instance a graphic at every anchor of a point source.

The only node with two upstream dependencies. Both are evaluated with the
footprint the node itself received; the merge afterwards is sequential, so
instance stacking follows anchor order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, TypeVar

import numpy as np

from vectornodes.engine.footprint import Footprint
from vectornodes.engine.node import Node
from vectornodes.models.graphic_group import ConcatElement, GraphicElementRendered
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import identity, transform_point, translation
from vectornodes.utils.geometry import anchors

logger = logging.getLogger(__name__)


class Instanceable(GraphicElementRendered, ConcatElement, Protocol):
    """Renderable, mergeable and transform-bearing; constructed empty with no arguments."""


I = TypeVar("I", bound=Instanceable)


def copy_to_points(points: VectorData, instance: I) -> I:
    """Merge one copy of ``instance`` per anchor, centered on the anchor."""
    box = instance.bounding_box(identity())
    center_offset = -0.5 * (box[0] + box[1]) if box is not None else np.zeros(2)

    result = type(instance)()
    placed = 0
    for subpath in points.subpaths:
        for point in anchors(subpath):
            target = transform_point(points.transform, point) + center_offset
            result.concat(instance, translation(target))
            placed += 1

    logger.debug("Placed %d instances of %s", placed, type(instance).__name__)
    return result


class CopyToPoints(Node[I]):
    def __init__(self, points: Node[VectorData], instance: Node[I]) -> None:
        self.points = points
        self.instance = instance
        self.name = "CopyToPoints"

    async def eval(self, footprint: Footprint) -> I:
        points, instance = await asyncio.gather(
            self.points.eval(footprint),
            self.instance.eval(footprint),
        )
        return copy_to_points(points, instance)
