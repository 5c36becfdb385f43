"""2D affine helpers on 3x3 homogeneous matrices. No engine imports.

Matrices act on column vectors, so ``a @ b`` applies ``b`` first.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

Affine = NDArray[np.float64]


def identity() -> Affine:
    return np.eye(3)


def translation(offset: ArrayLike) -> Affine:
    x, y = np.asarray(offset, dtype=np.float64)
    return np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])


def rotation(angle: float) -> Affine:
    """Counter-clockwise rotation by ``angle`` radians (y axis up)."""
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def scale(sx: float, sy: float | None = None) -> Affine:
    sy = sx if sy is None else sy
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def from_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> Affine:
    """Build from SVG ``matrix(a b c d e f)`` coefficients."""
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])


def to_svg_matrix(m: Affine) -> tuple[float, float, float, float, float, float]:
    return (
        float(m[0, 0]),
        float(m[1, 0]),
        float(m[0, 1]),
        float(m[1, 1]),
        float(m[0, 2]),
        float(m[1, 2]),
    )


def inverse(m: Affine) -> Affine:
    return np.linalg.inv(m)


def is_identity(m: Affine) -> bool:
    return bool(np.array_equal(m, np.eye(3)))


def transform_point(m: Affine, point: ArrayLike) -> NDArray[np.float64]:
    x, y = np.asarray(point, dtype=np.float64)
    return m[:2, :2] @ np.array([x, y]) + m[:2, 2]


def transform_vector(m: Affine, vector: ArrayLike) -> NDArray[np.float64]:
    """Linear part only; translation does not move a vector."""
    x, y = np.asarray(vector, dtype=np.float64)
    return m[:2, :2] @ np.array([x, y])
