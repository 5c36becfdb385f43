"""Fill and stroke setters. Only ``vector_data.style`` changes."""

from __future__ import annotations

from collections.abc import Sequence

from numpy.typing import ArrayLike

from vectornodes.engine.node import node_fn
from vectornodes.models.style import (
    Color,
    Fill,
    FillType,
    Gradient,
    GradientType,
    LineCap,
    LineJoin,
    Stroke,
)
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import Affine


@node_fn(name="SetFill", description="Replace the fill with a solid color or gradient")
def set_fill(
    vector_data: VectorData,
    fill_type: FillType,
    solid_color: Color | None,
    gradient_type: GradientType,
    start: ArrayLike,
    end: ArrayLike,
    transform: Affine,
    positions: Sequence[tuple[float, Color | None]],
) -> VectorData:
    if fill_type is FillType.GRADIENT:
        fill = Fill.from_gradient(
            Gradient(
                start=start,
                end=end,
                transform=transform,
                positions=list(positions),
                gradient_type=gradient_type,
            )
        )
    else:
        fill = Fill.solid(solid_color) if solid_color is not None else Fill.none()

    vector_data.style.set_fill(fill)
    return vector_data


@node_fn(name="SetStroke", description="Replace the stroke")
def set_stroke(
    vector_data: VectorData,
    color: Color | None,
    weight: float,
    dash_lengths: Sequence[float],
    dash_offset: float,
    line_cap: LineCap,
    line_join: LineJoin,
    miter_limit: float,
) -> VectorData:
    # float() widens single-precision inputs (numpy.float32) and leaves doubles as they are
    vector_data.style.set_stroke(
        Stroke(
            color=color,
            weight=float(weight),
            dash_lengths=[float(d) for d in dash_lengths],
            dash_offset=float(dash_offset),
            line_cap=line_cap,
            line_join=line_join,
            line_join_miter_limit=float(miter_limit),
        )
    )
    return vector_data
