"""Repeat, CircularRepeat and BoundingBox: pure geometry nodes."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import ArrayLike

from vectornodes.engine.node import node_fn
from vectornodes.errors import DegenerateGeometryError
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import identity, inverse, rotation, transform_vector, translation
from vectornodes.utils.geometry import apply_transform, bbox_center, new_rect

logger = logging.getLogger(__name__)


@node_fn(name="Repeat", description="Copy every path along a direction")
def repeat(vector_data: VectorData, direction: ArrayLike, count: int) -> VectorData:
    """``count`` copies of every path, copy ``i`` offset by ``i * direction``.

    ``direction`` is given in the parent space and mapped into local space,
    so the step is measured in the units the caller sees.
    """
    if count > 1:
        local_direction = transform_vector(inverse(vector_data.transform), direction)
    else:
        # Copy 0 is never translated
        local_direction = np.zeros(2)

    new_subpaths = []
    for i in range(count):
        step = translation(local_direction * i)
        for subpath in vector_data.subpaths:
            new_subpaths.append(apply_transform(subpath, step))

    vector_data.subpaths = new_subpaths
    return vector_data


@node_fn(name="CircularRepeat", description="Copy every path around a circle")
def circular_repeat(vector_data: VectorData, angle_offset: float, radius: float, count: int) -> VectorData:
    """``count`` copies spaced evenly on a circle around the bounding-box center.

    ``angle_offset`` is in degrees.
    """
    box = vector_data.local_bounding_box()
    if box is None:
        raise DegenerateGeometryError("CircularRepeat needs geometry with a bounding box")

    center = bbox_center(box)
    base = translation(np.array([0.0, float(radius)]) - center)
    offset = math.radians(float(angle_offset))

    new_subpaths = []
    for i in range(count):
        angle = (2.0 * math.pi / count) * i + offset
        step = translation(center) @ rotation(angle) @ base
        for subpath in vector_data.subpaths:
            new_subpaths.append(apply_transform(subpath, step))

    vector_data.subpaths = new_subpaths
    return vector_data


@node_fn(name="BoundingBox", description="Rectangle enclosing the transformed geometry")
def bounding_box(vector_data: VectorData) -> VectorData:
    box = vector_data.bounding_box(identity())
    if box is None:
        raise DegenerateGeometryError("BoundingBox needs geometry with a bounding box")

    logger.debug("Bounding box %s -> %s", box[0], box[1])
    return VectorData.from_subpath(new_rect(box[0], box[1]))
