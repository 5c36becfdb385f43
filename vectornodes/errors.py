"""Typed errors raised by nodes."""

from __future__ import annotations


class VectorNodesError(Exception):
    """Base error of the package."""


class DegenerateGeometryError(VectorNodesError, ValueError):
    """Geometry has no computable extent (no paths, empty segments)."""
