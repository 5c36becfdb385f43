"""Shared test fixtures."""

from __future__ import annotations

import pytest
from svgpathtools import Path, polygon, polyline

from vectornodes.engine.footprint import Footprint
from vectornodes.models.vector_data import VectorData
from vectornodes.utils.affine import scale


# Scene geometry used across tests

# Right triangle (0,0)-(4,0)-(4,3), closed
TRIANGLE = (0 + 0j, 4 + 0j, 4 + 3j)

# Axis-aligned square centered on (1, 1)
SQUARE = (0 + 0j, 2 + 0j, 2 + 2j, 0 + 2j)

# Straight open line of length 10 along x
LINE = (0 + 0j, 10 + 0j)

# Open zig-zag with four anchors
ZIGZAG = (0 + 0j, 3 + 4j, 6 + 0j, 9 + 4j)


def triangle_path() -> Path:
    return polygon(*TRIANGLE)


def square_path() -> Path:
    return polygon(*SQUARE)


def line_path() -> Path:
    return polyline(*LINE)


def zigzag_path() -> Path:
    return polyline(*ZIGZAG)


@pytest.fixture
def triangle() -> VectorData:
    return VectorData.from_subpath(triangle_path())


@pytest.fixture
def square() -> VectorData:
    return VectorData.from_subpath(square_path())


@pytest.fixture
def line() -> VectorData:
    return VectorData.from_subpath(line_path())


@pytest.fixture
def scaled_line() -> VectorData:
    vd = VectorData.from_subpath(line_path())
    vd.transform = scale(2.0)
    return vd


@pytest.fixture
def footprint() -> Footprint:
    return Footprint(transform=scale(0.5), resolution=(800, 600))
