"""Write SVG markup for graphic elements."""

from __future__ import annotations

import itertools
from collections.abc import Callable

from vectornodes.models.graphic_group import GraphicElementRendered
from vectornodes.utils.affine import identity


class SvgRender:
    """Accumulates element markup and shared ``<defs>`` for one document."""

    def __init__(self) -> None:
        self.svg: list[str] = []
        self.svg_defs: list[str] = []
        self._ids = itertools.count()
        self._indent = 1

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def add_def(self, markup: str) -> None:
        self.svg_defs.append(markup)

    def leaf_tag(self, markup: str) -> None:
        self.svg.append("  " * self._indent + markup)

    def parent_tag(self, open_tag: str, close_tag: str, inner: Callable[[SvgRender], None]) -> None:
        self.leaf_tag(open_tag)
        self._indent += 1
        inner(self)
        self._indent -= 1
        self.leaf_tag(close_tag)

    def format_svg(self, min_x: float, min_y: float, width: float, height: float) -> str:
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg viewBox="{min_x} {min_y} {width} {height}" xmlns="http://www.w3.org/2000/svg">',
        ]
        if self.svg_defs:
            lines.append("  <defs>" + "".join(self.svg_defs) + "</defs>")
        lines.extend(self.svg)
        lines.append("</svg>")
        return "\n".join(lines)


def to_svg(element: GraphicElementRendered, padding: float = 0.0) -> str:
    """Render ``element`` into a standalone SVG document framed on its bounds."""
    render = SvgRender()
    element.render_svg(render)

    bounds = element.bounding_box(identity())
    if bounds is None:
        return render.format_svg(0.0, 0.0, 0.0, 0.0)
    (xmin, ymin), (xmax, ymax) = bounds
    return render.format_svg(
        float(xmin) - padding,
        float(ymin) - padding,
        float(xmax - xmin) + 2 * padding,
        float(ymax - ymin) + 2 * padding,
    )
