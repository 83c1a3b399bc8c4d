# MIT License (see LICENSE)
"""
Array coercion helpers shared by the data model and the geometry kernel.

Points are 2D vectors held as float64 numpy arrays of shape (2,);
trajectories are float64 arrays of shape (N, 2).
"""
from __future__ import annotations

import numpy as np

from .errors import InvalidInputError


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def as_point(p) -> tuple[float, float]:
    """
    Unpack a point-like value into a plain (x, y) float pair.

    The kernel runs on Python floats; unpacking once per call avoids
    repeated numpy scalar indexing inside the distance formulas.
    """
    return float(p[0]), float(p[1])


def as_points(points) -> np.ndarray:
    """
    Coerce a sequence of waypoints to a read-only float64 array of shape (N, 2).

    An empty sequence yields shape (0, 2).

    Raises:
        InvalidInputError: If the input is not a list of 2D points or holds
            non-finite coordinates.
    """
    try:
        if not isinstance(points, np.ndarray):
            points = list(points)
        arr = f64(points)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Trajectory points are not numeric: {exc}") from exc

    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(f"Trajectory must have shape (N, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("Trajectory contains non-finite coordinates")

    arr.setflags(write=False)
    return arr


def norm(dx: float, dy: float) -> float:
    """Length of the vector (dx, dy)."""
    return float(np.sqrt(dx * dx + dy * dy))


def cross2(ax: float, ay: float, bx: float, by: float) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    Positive result means b is counterclockwise from a.
    """
    return ax * by - ay * bx
