"""Paint appearance of vector data: colors, fills, gradients and strokes.

All values here are plain data. Setter nodes replace them wholesale, they
are never merged field by field.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from vectornodes.utils.affine import Affine, identity, transform_point

if TYPE_CHECKING:
    from vectornodes.svg.serializer import SvgRender


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-1 range components."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def from_rgba8(r: int, g: int, b: int, a: int = 255) -> Color:
        return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @staticmethod
    def from_hex(hex_str: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa``."""
        value = hex_str.strip().lstrip("#")
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value)
        if len(value) not in (6, 8):
            raise ValueError(f"Invalid hex color: {hex_str!r}")
        channels = [int(value[i : i + 2], 16) for i in range(0, len(value), 2)]
        return Color.from_rgba8(*channels)

    def to_rgb_hex(self) -> str:
        return "".join(f"{round(c * 255):02x}" for c in (self.r, self.g, self.b))

    @property
    def alpha(self) -> float:
        return self.a

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)


class FillType(enum.Enum):
    NONE = "none"
    SOLID = "solid"
    GRADIENT = "gradient"


class GradientType(enum.Enum):
    LINEAR = "linear"
    RADIAL = "radial"


class LineCap(enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(enum.Enum):
    MITER = "miter"
    BEVEL = "bevel"
    ROUND = "round"


@dataclass
class Gradient:
    """Gradient between ``start`` and ``end`` in the path's local space.

    ``positions`` are ordered ``(offset, color)`` stops; a stop without a
    color is kept for editing but not painted.
    """

    start: NDArray[np.float64] = field(default_factory=lambda: np.zeros(2))
    end: NDArray[np.float64] = field(default_factory=lambda: np.array([1.0, 0.0]))
    transform: Affine = field(default_factory=identity)
    positions: list[tuple[float, Color | None]] = field(default_factory=list)
    gradient_type: GradientType = GradientType.LINEAR

    def __post_init__(self) -> None:
        self.start = np.asarray(self.start, dtype=np.float64)
        self.end = np.asarray(self.end, dtype=np.float64)
        self.positions = [(float(offset), color) for offset, color in self.positions]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (
            np.array_equal(self.start, other.start)
            and np.array_equal(self.end, other.end)
            and np.array_equal(self.transform, other.transform)
            and self.positions == other.positions
            and self.gradient_type == other.gradient_type
        )

    def render_defs(self, render: SvgRender) -> str:
        """Write the gradient element into ``render``'s defs, return its id."""
        gradient_id = render.next_id("gradient")
        start = transform_point(self.transform, self.start)
        end = transform_point(self.transform, self.end)

        stops = "".join(
            f'<stop offset="{offset}" stop-color="#{color.to_rgb_hex()}"'
            + (f' stop-opacity="{color.a}"' if color.a != 1.0 else "")
            + " />"
            for offset, color in self.positions
            if color is not None
        )

        if self.gradient_type is GradientType.LINEAR:
            render.add_def(
                f'<linearGradient id="{gradient_id}" gradientUnits="userSpaceOnUse" '
                f'x1="{start[0]}" y1="{start[1]}" x2="{end[0]}" y2="{end[1]}">{stops}</linearGradient>'
            )
        else:
            radius = float(np.linalg.norm(end - start))
            render.add_def(
                f'<radialGradient id="{gradient_id}" gradientUnits="userSpaceOnUse" '
                f'cx="{start[0]}" cy="{start[1]}" r="{radius}">{stops}</radialGradient>'
            )
        return gradient_id


@dataclass
class Fill:
    """No fill, a solid color, or a gradient."""

    kind: FillType = FillType.NONE
    color: Color | None = None
    gradient: Gradient | None = None

    @staticmethod
    def none() -> Fill:
        return Fill()

    @staticmethod
    def solid(color: Color) -> Fill:
        return Fill(kind=FillType.SOLID, color=color)

    @staticmethod
    def from_gradient(gradient: Gradient) -> Fill:
        return Fill(kind=FillType.GRADIENT, gradient=gradient)

    def render(self, render: SvgRender) -> str:
        if self.kind is FillType.SOLID and self.color is not None:
            attrs = f' fill="#{self.color.to_rgb_hex()}"'
            if self.color.a != 1.0:
                attrs += f' fill-opacity="{self.color.a}"'
            return attrs
        if self.kind is FillType.GRADIENT and self.gradient is not None:
            return f' fill="url(#{self.gradient.render_defs(render)})"'
        return ' fill="none"'


@dataclass
class Stroke:
    color: Color | None = None
    weight: float = 0.0
    dash_lengths: list[float] = field(default_factory=list)
    dash_offset: float = 0.0
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER
    line_join_miter_limit: float = 4.0

    def render(self) -> str:
        if self.color is None or self.weight <= 0:
            return ""
        attrs = f' stroke="#{self.color.to_rgb_hex()}" stroke-width="{self.weight}"'
        if self.color.a != 1.0:
            attrs += f' stroke-opacity="{self.color.a}"'
        if self.dash_lengths:
            attrs += f' stroke-dasharray="{" ".join(str(d) for d in self.dash_lengths)}"'
        if self.dash_offset != 0.0:
            attrs += f' stroke-dashoffset="{self.dash_offset}"'
        if self.line_cap is not LineCap.BUTT:
            attrs += f' stroke-linecap="{self.line_cap.value}"'
        if self.line_join is not LineJoin.MITER:
            attrs += f' stroke-linejoin="{self.line_join.value}"'
        if self.line_join_miter_limit != 4.0:
            attrs += f' stroke-miterlimit="{self.line_join_miter_limit}"'
        return attrs


@dataclass
class PathStyle:
    stroke: Stroke | None = None
    fill: Fill = field(default_factory=Fill)

    def set_fill(self, fill: Fill) -> None:
        self.fill = fill

    def set_stroke(self, stroke: Stroke) -> None:
        self.stroke = stroke

    def clear_fill(self) -> None:
        self.fill = Fill.none()

    def clear_stroke(self) -> None:
        self.stroke = None

    def render(self, render: SvgRender) -> str:
        stroke = self.stroke.render() if self.stroke is not None else ""
        return self.fill.render(render) + stroke
