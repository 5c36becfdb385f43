"""Hierarchical graphic elements and the protocols nodes rely on.

A GraphicGroup is a container: each child carries its own transform and
the group transform is applied on top of it.
"""

from __future__ import annotations

import base64
import copy
import io
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from vectornodes.models.blending import AlphaBlending
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import Affine, identity, to_svg_matrix, transform_point
from vectornodes.utils.geometry import BBox, combine_bboxes

if TYPE_CHECKING:
    from vectornodes.svg.serializer import SvgRender


@runtime_checkable
class GraphicElementRendered(Protocol):
    """Anything the SVG renderer and bounding-box queries understand."""

    transform: Affine

    def bounding_box(self, transform: Affine) -> BBox | None: ...

    def render_svg(self, render: SvgRender) -> None: ...


class ConcatElement(Protocol):
    """Mergeable into a value of its own type under an extra transform."""

    def concat(self, other: Any, transform: Affine) -> None: ...


@dataclass
class ImageFrame:
    """Raster element occupying the unit square of its local space."""

    image: NDArray[np.uint8] = field(default_factory=lambda: np.zeros((0, 0, 4), dtype=np.uint8))
    transform: Affine = field(default_factory=identity)
    alpha_blending: AlphaBlending = field(default_factory=AlphaBlending)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageFrame):
            return NotImplemented
        return (
            np.array_equal(self.image, other.image)
            and np.array_equal(self.transform, other.transform)
            and self.alpha_blending == other.alpha_blending
        )

    @property
    def is_empty(self) -> bool:
        return self.image.shape[0] == 0 or self.image.shape[1] == 0

    def bounding_box(self, transform: Affine) -> BBox | None:
        if self.is_empty:
            return None
        full = transform @ self.transform
        corners = np.array([transform_point(full, c) for c in ((0, 0), (1, 0), (1, 1), (0, 1))])
        return np.array([corners.min(axis=0), corners.max(axis=0)])

    def to_png_base64(self) -> str:
        buf = io.BytesIO()
        Image.fromarray(self.image).save(buf, format="PNG")
        return base64.b64encode(buf.getvalue()).decode("ascii")

    def render_svg(self, render: SvgRender) -> None:
        if self.is_empty:
            return
        matrix = " ".join(str(v) for v in to_svg_matrix(self.transform))
        render.leaf_tag(
            f'<image width="1" height="1" preserveAspectRatio="none" '
            f'href="data:image/png;base64,{self.to_png_base64()}" '
            f'transform="matrix({matrix})"{self.alpha_blending.render()} />'
        )


GraphicElement = Union[VectorData, "GraphicGroup", ImageFrame]


@dataclass
class GraphicGroup:
    elements: list[GraphicElement] = field(default_factory=list)
    transform: Affine = field(default_factory=identity)
    alpha_blending: AlphaBlending = field(default_factory=AlphaBlending)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphicGroup):
            return NotImplemented
        return (
            self.elements == other.elements
            and np.array_equal(self.transform, other.transform)
            and self.alpha_blending == other.alpha_blending
        )

    def __iter__(self) -> Iterator[GraphicElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> GraphicElement:
        return self.elements[index]

    def push(self, element: GraphicElement) -> None:
        self.elements.append(element)

    def bounding_box(self, transform: Affine) -> BBox | None:
        full = transform @ self.transform
        return combine_bboxes(element.bounding_box(full) for element in self.elements)

    def concat(self, other: GraphicGroup, transform: Affine) -> None:
        """Append copies of ``other``'s children; ``other`` itself is flattened away."""
        # Snapshot first, `other` may be `self`
        elements = list(other.elements)
        other_transform = other.transform.copy()
        for element in elements:
            element = copy.deepcopy(element)
            element.transform = transform @ element.transform @ other_transform
            self.push(element)
        self.alpha_blending = copy.copy(other.alpha_blending)

    def render_svg(self, render: SvgRender) -> None:
        matrix = " ".join(str(v) for v in to_svg_matrix(self.transform))

        def children(inner: SvgRender) -> None:
            for element in self.elements:
                element.render_svg(inner)

        render.parent_tag(
            f'<g transform="matrix({matrix})"{self.alpha_blending.render()}>', "</g>", children
        )
