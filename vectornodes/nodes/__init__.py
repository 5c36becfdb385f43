"""Geometry, style and instancing nodes."""

from vectornodes.nodes.copy_to_points import CopyToPoints, copy_to_points
from vectornodes.nodes.repeat import bounding_box, circular_repeat, repeat
from vectornodes.nodes.sampling import sample_points, splines_from_points
from vectornodes.nodes.style_nodes import set_fill, set_stroke

__all__ = [
    "CopyToPoints",
    "copy_to_points",
    "bounding_box",
    "circular_repeat",
    "repeat",
    "sample_points",
    "splines_from_points",
    "set_fill",
    "set_stroke",
]
