"""VectorData: the value flowing between geometry nodes.

Paths are stored in local space; ``transform`` maps local space to the
parent. Nodes take ownership of the VectorData they receive and may mutate
and return it.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from svgpathtools import Path

from vectornodes.models.blending import AlphaBlending
from vectornodes.models.style import PathStyle
from vectornodes.utils.affine import Affine, identity, to_svg_matrix
from vectornodes.utils.geometry import BBox, apply_transform, bounding_box

if TYPE_CHECKING:
    from vectornodes.svg.serializer import SvgRender


@dataclass
class VectorData:
    subpaths: list[Path] = field(default_factory=list)
    transform: Affine = field(default_factory=identity)
    style: PathStyle = field(default_factory=PathStyle)
    # Ids of anchors whose handles mirror each other
    mirror_angle: list[int] = field(default_factory=list)
    alpha_blending: AlphaBlending = field(default_factory=AlphaBlending)

    @classmethod
    def from_subpaths(cls, subpaths: Iterable[Path]) -> VectorData:
        return cls(subpaths=list(subpaths))

    @classmethod
    def from_subpath(cls, subpath: Path) -> VectorData:
        return cls(subpaths=[subpath])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorData):
            return NotImplemented
        return (
            self.subpaths == other.subpaths
            and np.array_equal(self.transform, other.transform)
            and self.style == other.style
            and self.mirror_angle == other.mirror_angle
            and self.alpha_blending == other.alpha_blending
        )

    def local_bounding_box(self) -> BBox | None:
        """Box of the paths in their own space, ignoring ``transform``."""
        return bounding_box(self.subpaths, identity())

    def bounding_box(self, transform: Affine) -> BBox | None:
        """Box in the space reached by ``transform @ self.transform``."""
        return bounding_box(self.subpaths, transform @ self.transform)

    def concat(self, other: VectorData, transform: Affine) -> None:
        """Append ``other``'s paths, baking ``transform @ other.transform`` into them."""
        # Snapshot first, `other` may be `self`
        subpaths = list(other.subpaths)
        mirror_angle = list(other.mirror_angle)
        full = transform @ other.transform
        for subpath in subpaths:
            self.subpaths.append(apply_transform(subpath, full))
        # TODO: merge gradient fills per path instead of letting the last style win
        self.style = copy.deepcopy(other.style)
        self.mirror_angle.extend(mirror_angle)
        self.alpha_blending = copy.copy(other.alpha_blending)

    def render_svg(self, render: SvgRender) -> None:
        d = " ".join(p.d() for p in self.subpaths if len(p) > 0)
        matrix = " ".join(str(v) for v in to_svg_matrix(self.transform))
        render.leaf_tag(
            f'<path d="{d}" transform="matrix({matrix})"'
            f"{self.style.render(render)}{self.alpha_blending.render()} />"
        )
