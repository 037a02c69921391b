"""Rotation matrices built from an angle in degrees."""

from __future__ import annotations

import math


def _sin_cos(degrees: float) -> tuple[float, float]:
    radians = degrees * math.pi / 180.0
    return math.sin(radians), math.cos(radians)


def rotation_to_matrix(degrees: float) -> list[float]:
    """Return the 2x2 rotation matrix, row by row."""
    sin, cos = _sin_cos(degrees)
    return [cos, -sin, sin, cos]


def rotation_to_transform_matrix(degrees: float) -> list[float]:
    """Return the six-value 2D transform matrix for the rotation."""
    sin, cos = _sin_cos(degrees)
    return [cos, sin, -sin, cos, 0.0, 0.0]