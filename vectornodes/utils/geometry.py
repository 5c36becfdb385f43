"""Leaf-node path helpers: facade over svgpathtools. No engine imports.

Points cross this boundary as shape-(2,) float arrays; svgpathtools keeps
them as complex numbers internally.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.interpolate import CubicSpline
from svgpathtools import CubicBezier, Path, polygon, polyline
from svgpathtools.path import transform as _transform_curve

from vectornodes.utils.affine import Affine

BBox = NDArray[np.float64]  # [[xmin, ymin], [xmax, ymax]]

_CLOSE_TOLERANCE = 1e-9


def to_complex(point: ArrayLike) -> complex:
    x, y = np.asarray(point, dtype=np.float64)
    return complex(float(x), float(y))


def to_point(z: complex) -> NDArray[np.float64]:
    return np.array([z.real, z.imag])


def is_closed(path: Path) -> bool:
    """Closed when the last segment ends on the first segment's start."""
    return len(path) > 0 and path.start == path.end


def anchors(path: Path) -> list[NDArray[np.float64]]:
    """Anchor points in order. A closed path does not repeat its first anchor."""
    if len(path) == 0:
        return []
    points = [to_point(seg.start) for seg in path]
    if not is_closed(path):
        points.append(to_point(path.end))
    return points


def apply_transform(path: Path, tf: Affine) -> Path:
    """Return a transformed copy; the input path is never aliased."""
    if len(path) == 0:
        return Path()
    result = _transform_curve(path, tf)
    if result is path:
        # svgpathtools hands back the same object for the identity matrix
        result = copy.deepcopy(path)
    return result


def path_length(path: Path) -> float:
    if len(path) == 0:
        return 0.0
    return float(path.length())


def point_at_length(path: Path, distance: float) -> NDArray[np.float64]:
    """Evaluate at an arc-length distance from the start, clamped to the path."""
    if len(path) == 0:
        raise ValueError("Cannot evaluate a path with no segments")
    if distance <= 0:
        return to_point(path.start)

    travelled = 0.0
    for seg in path:
        seg_length = seg.length()
        if distance < travelled + seg_length:
            local = distance - travelled
            if local <= 0:
                return to_point(seg.start)
            return to_point(seg.point(seg.ilength(local)))
        travelled += seg_length
    return to_point(path.end)


def path_bbox(path: Path) -> BBox | None:
    if len(path) == 0:
        return None
    xmin, xmax, ymin, ymax = path.bbox()
    return np.array([[xmin, ymin], [xmax, ymax]], dtype=np.float64)


def combine_bboxes(boxes: Iterable[BBox | None]) -> BBox | None:
    """Union of boxes, skipping missing ones. None when nothing remains."""
    found = [b for b in boxes if b is not None]
    if not found:
        return None
    stacked = np.stack(found)
    return np.array([stacked[:, 0].min(axis=0), stacked[:, 1].max(axis=0)])


def bounding_box(paths: Iterable[Path], tf: Affine) -> BBox | None:
    """Axis-aligned box of ``paths`` after applying ``tf``."""
    return combine_bboxes(path_bbox(apply_transform(p, tf)) for p in paths)


def bbox_center(box: BBox) -> NDArray[np.float64]:
    return (box[0] + box[1]) / 2.0


def from_anchors(points: Iterable[ArrayLike], closed: bool) -> Path:
    """Straight-line path through ``points``; fewer than two gives an empty path."""
    zs = [to_complex(p) for p in points]
    if closed and len(zs) > 2 and abs(zs[-1] - zs[0]) <= _CLOSE_TOLERANCE:
        # The closing segment already returns to the first anchor
        zs = zs[:-1]
    if len(zs) < 2:
        return Path()
    if closed:
        return polygon(*zs)
    return polyline(*zs)


def new_rect(corner1: ArrayLike, corner2: ArrayLike) -> Path:
    (x1, y1), (x2, y2) = np.asarray(corner1, dtype=np.float64), np.asarray(corner2, dtype=np.float64)
    return polygon(complex(x1, y1), complex(x2, y1), complex(x2, y2), complex(x1, y2))


def cubic_spline(points: Sequence[ArrayLike], closed: bool = False) -> Path:
    """Natural (or periodic, when closed) cubic spline through ``points``.

    Uniform parameterization: one unit of parameter per anchor interval, so
    each interval maps to one cubic Bezier with handles at ±derivative/3.
    """
    pts = np.asarray([np.asarray(p, dtype=np.float64) for p in points]).reshape(-1, 2)
    n = len(pts)
    if n < 2:
        return Path()
    if n == 2:
        a, b = to_complex(pts[0]), to_complex(pts[1])
        return Path(CubicBezier(a, a + (b - a) / 3, b - (b - a) / 3, b))

    if closed and n >= 3:
        knots = np.vstack([pts, pts[:1]])
        spline = CubicSpline(np.arange(n + 1), knots, bc_type="periodic", axis=0)
    else:
        knots = pts
        spline = CubicSpline(np.arange(n), knots, bc_type="natural", axis=0)

    derivs = spline(np.arange(len(knots)), 1)
    segments = []
    for i in range(len(knots) - 1):
        start = to_complex(knots[i])
        end = to_complex(knots[i + 1])
        handle1 = to_complex(knots[i] + derivs[i] / 3.0)
        handle2 = to_complex(knots[i + 1] - derivs[i + 1] / 3.0)
        segments.append(CubicBezier(start, handle1, handle2, end))
    return Path(*segments)
