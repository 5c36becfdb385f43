"""Footprint: the spatial context every node evaluation receives."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from vectornodes.utils.affine import Affine, identity


@dataclass(frozen=True, eq=False)
class Footprint:
    """Viewport transform and output resolution for one evaluation request.

    Passed as a plain argument down the graph; nodes never store it.
    """

    # Document space -> viewport pixels
    transform: Affine = field(default_factory=identity)
    resolution: tuple[int, int] = (1920, 1080)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Footprint):
            return NotImplemented
        return np.array_equal(self.transform, other.transform) and self.resolution == other.resolution

    def __hash__(self) -> int:
        return hash((self.transform.tobytes(), self.resolution))

    @property
    def scale(self) -> float:
        """Uniform zoom factor of the viewport transform."""
        return float(np.sqrt(abs(np.linalg.det(self.transform[:2, :2]))))
