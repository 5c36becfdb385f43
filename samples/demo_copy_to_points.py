"""
vectornodes demo
Scatters stroked circles along a spline and writes the result as SVG.
"""
from pathlib import Path

from vectornodes.config import configure_logging
from vectornodes.engine import Footprint, ValueNode, create_executor
from vectornodes.models.graphic_group import GraphicGroup
from vectornodes.models.style import Color, FillType, GradientType, LineCap, LineJoin
from vectornodes.nodes import (
    CopyToPoints,
    bounding_box,
    circular_repeat,
    repeat,
    sample_points,
    set_fill,
    set_stroke,
    splines_from_points,
)
from vectornodes.svg.parser import parse_vector_data
from vectornodes.svg.serializer import to_svg
from vectornodes.utils.affine import identity

configure_logging("DEBUG")

# ============================================================
# STEP 1: Points (a zigzag, smoothed, resampled every 15 units)
# ============================================================
zigzag = parse_vector_data("M0 0 L40 60 L80 0 L120 60 L160 0")
points = ValueNode(zigzag, name="Zigzag")
points = splines_from_points.node(points)
points = sample_points.node(points, spacing=15.0, start_offset=0.0, stop_offset=0.0, adaptive_spacing=True)
points = repeat.node(points, direction=(0.0, 90.0), count=2)

# ============================================================
# STEP 2: Instance (a petal ring with a radial fill)
# ============================================================
petal = parse_vector_data("M0 0 L4 0 L2 6 Z")
instance = circular_repeat.node(ValueNode(petal, name="Petal"), angle_offset=0.0, radius=5.0, count=6)
instance = set_fill.node(
    instance,
    fill_type=FillType.GRADIENT,
    solid_color=None,
    gradient_type=GradientType.RADIAL,
    start=(2.0, 3.0),
    end=(9.0, 3.0),
    transform=identity(),
    positions=[(0.0, Color.from_hex("#ffcc00")), (1.0, Color.from_hex("#ff3300"))],
)
instance = set_stroke.node(
    instance,
    color=Color.from_hex("#331100"),
    weight=0.5,
    dash_lengths=[],
    dash_offset=0.0,
    line_cap=LineCap.ROUND,
    line_join=LineJoin.ROUND,
    miter_limit=4.0,
)

# ============================================================
# STEP 3: Copy to points, then frame the result
# ============================================================
scattered = CopyToPoints(points, instance)
frame = bounding_box.node(scattered)

executor = create_executor()
footprint = Footprint(resolution=(1280, 720))
result = executor.run(scattered, footprint)
outline = executor.run(frame, footprint)

print("=" * 60)
print(f"Instances placed: {len(result.subpaths) // 6}")
print(f"Bounds: {result.bounding_box(identity()).tolist()}")
print("=" * 60)

document = GraphicGroup(elements=[outline, result])
out_path = Path(__file__).resolve().parent / "copy_to_points.svg"
out_path.write_text(to_svg(document, padding=10.0), encoding="utf-8")
print(f"Wrote {out_path}")
