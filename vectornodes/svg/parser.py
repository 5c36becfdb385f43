"""SVG path-data importer: facade over svgpathtools.

Converts a ``d`` attribute (and optional ``transform`` attribute) into
VectorData, one subpath per continuous run of segments.
"""

from __future__ import annotations

import logging

from svgpathtools import parse_path, parse_transform

from vectornodes.models.style import Color, Fill, PathStyle, Stroke
from vectornodes.models.vector_data import VectorData

logger = logging.getLogger(__name__)


def parse_vector_data(
    d: str,
    transform: str | None = None,
    fill: str | None = None,
    stroke: str | None = None,
    stroke_width: float = 1.0,
) -> VectorData:
    """Build VectorData from SVG path data.

    ``fill`` and ``stroke`` accept hex colors or ``"none"``.
    """
    path = parse_path(d)
    subpaths = path.continuous_subpaths() if len(path) > 0 else []

    vector_data = VectorData.from_subpaths(subpaths)
    vector_data.transform = parse_transform(transform)
    vector_data.style = PathStyle(
        fill=_parse_fill(fill),
        stroke=_parse_stroke(stroke, stroke_width),
    )

    logger.debug("Parsed %d subpaths from path data", len(subpaths))
    return vector_data


def _parse_fill(value: str | None) -> Fill:
    if value is None or value.lower() == "none":
        return Fill.none()
    return Fill.solid(Color.from_hex(value))


def _parse_stroke(value: str | None, width: float) -> Stroke | None:
    if value is None or value.lower() == "none":
        return None
    return Stroke(color=Color.from_hex(value), weight=float(width))
