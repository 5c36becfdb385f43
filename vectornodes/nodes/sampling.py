"""Arc-length resampling and spline reconstruction of paths."""

from __future__ import annotations

import logging
import math
import sys

from vectornodes.engine.node import node_fn
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import inverse
from vectornodes.utils.geometry import (
    anchors,
    apply_transform,
    cubic_spline,
    from_anchors,
    is_closed,
    path_length,
    point_at_length,
)

logger = logging.getLogger(__name__)

# Keeps exact multiples (e.g. 10 / 2.5) from flooring one sample short
_FIXED_SPACING_EPSILON = sys.float_info.epsilon


def _round_half_away(value: float) -> float:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


@node_fn(name="SamplePoints", description="Replace paths with evenly spaced points along them")
def sample_points(
    vector_data: VectorData,
    spacing: float,
    start_offset: float,
    stop_offset: float,
    adaptive_spacing: bool,
) -> VectorData:
    """Resample every path by arc length in world space.

    Adaptive spacing rounds the sample count so the last sample lands on the
    far end (minus ``stop_offset``). Fixed spacing keeps the exact distance
    and usually stops short of the end.
    """
    spacing = float(spacing)
    start_offset = float(start_offset)
    stop_offset = float(stop_offset)
    to_world = vector_data.transform
    to_local = None

    for index, subpath in enumerate(vector_data.subpaths):
        if len(subpath) == 0 or not math.isfinite(spacing) or spacing <= 0:
            continue

        world = apply_transform(subpath, to_world)
        length = path_length(world)
        used_length = length - start_offset - stop_offset
        if used_length <= 0:
            logger.debug("Path %d shorter than its offsets, left as is", index)
            continue

        if adaptive_spacing:
            count = _round_half_away(used_length / spacing)
            used_length_here = used_length
        else:
            count = math.floor(used_length / spacing + _FIXED_SPACING_EPSILON)
            used_length_here = used_length - math.fmod(used_length, spacing)

        if count < 1:
            continue

        samples = [
            point_at_length(world, (c / count) * used_length_here + start_offset)
            for c in range(count + 1)
        ]
        resampled = from_anchors(samples, closed=is_closed(subpath) and count > 1)
        if to_local is None:
            to_local = inverse(to_world)
        vector_data.subpaths[index] = apply_transform(resampled, to_local)

    return vector_data


@node_fn(name="SplinesFromPoints", description="Fit smooth cubic splines through path anchors")
def splines_from_points(vector_data: VectorData) -> VectorData:
    vector_data.subpaths = [
        cubic_spline(anchors(subpath), closed=is_closed(subpath)) for subpath in vector_data.subpaths
    ]
    return vector_data
