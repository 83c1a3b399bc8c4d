# MIT License (see LICENSE)
"""
Distance primitives between points and finite 2D segments.

segment_distance() follows the parametric line-intersection scheme:

    A(t1) = a1 + t1 * dA,  dA = a2 - a1
    B(t2) = b1 + t2 * dB,  dB = b2 - b1

Solve A(t1) = B(t2) for the infinite lines. If both parameters fall in
[0, 1] the segments cross and the distance is 0. Otherwise each parameter is
clamped to [0, 1] on its own and the distance between the two clamped
points is returned. The clamped points always lie on the segments, so the
result never under-estimates the true minimum distance.

When the lines are (nearly) parallel the solve is skipped and a fallback
applies; the fallback is what distinguishes the metrics:

- "clamped":   0 if the segments cross (orientation test), otherwise the
               minimum of the four endpoint-to-opposite-segment distances.
               Symmetric, and exact whenever the fallback is taken.
- "reference": length of segment A, i.e. point_distance(a1, a2). Matches the
               historical behaviour, is asymmetric and may under-estimate.
- "exact":     true minimum segment-to-segment distance for every input:
               0 on an orientation-tested crossing, else the endpoint minimum.

All functions accept any point-like (tuple, list, numpy array) and return a
finite float for finite input. None of them raise on degenerate geometry.
"""
from __future__ import annotations

from ..constants import PARALLEL_EPS, DEGENERATE_EPS
from ..util import as_point, norm, cross2

SEGMENT_METRICS = ("clamped", "reference", "exact")


def point_distance(p1, p2) -> float:
    """Euclidean distance between two points."""
    x1, y1 = as_point(p1)
    x2, y2 = as_point(p2)
    return norm(x1 - x2, y1 - y2)


def point_segment_distance(p, s1, s2) -> float:
    """
    Distance from point p to the finite segment s1→s2.

    Projects p onto the segment's line and clamps the projection parameter
    to [0, 1]. A zero-length segment reduces to point distance.
    """
    px, py = as_point(p)
    x1, y1 = as_point(s1)
    x2, y2 = as_point(s2)
    dx, dy = x2 - x1, y2 - y1

    len2 = dx * dx + dy * dy
    if len2 < DEGENERATE_EPS:
        return norm(px - x1, py - y1)

    t = ((px - x1) * dx + (py - y1) * dy) / len2
    t = min(max(t, 0.0), 1.0)
    return norm(px - (x1 + dx * t), py - (y1 + dy * t))


def _orientation(px: float, py: float, qx: float, qy: float, rx: float, ry: float) -> float:
    """Sign of the turn p→q→r: positive counterclockwise, 0 when collinear."""
    return cross2(qx - px, qy - py, rx - px, ry - py)


def _within_box(px: float, py: float, qx: float, qy: float, rx: float, ry: float) -> bool:
    """Whether r lies in the bounding box of segment p→q (used for collinear r)."""
    return min(px, qx) <= rx <= max(px, qx) and min(py, qy) <= ry <= max(py, qy)


def segments_cross(a1, a2, b1, b2) -> bool:
    """
    Whether two finite segments share at least one point.

    Uses orientation signs only, so it stays reliable for short or nearly
    parallel segments where the line-parameter solve is ill-conditioned.
    Touching endpoints and collinear overlap count as crossing.
    """
    ax1, ay1 = as_point(a1)
    ax2, ay2 = as_point(a2)
    bx1, by1 = as_point(b1)
    bx2, by2 = as_point(b2)

    d1 = _orientation(bx1, by1, bx2, by2, ax1, ay1)
    d2 = _orientation(bx1, by1, bx2, by2, ax2, ay2)
    d3 = _orientation(ax1, ay1, ax2, ay2, bx1, by1)
    d4 = _orientation(ax1, ay1, ax2, ay2, bx2, by2)

    if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and ((d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)):
        return True

    # Collinear endpoint lying on the other segment
    if d1 == 0.0 and _within_box(bx1, by1, bx2, by2, ax1, ay1):
        return True
    if d2 == 0.0 and _within_box(bx1, by1, bx2, by2, ax2, ay2):
        return True
    if d3 == 0.0 and _within_box(ax1, ay1, ax2, ay2, bx1, by1):
        return True
    if d4 == 0.0 and _within_box(ax1, ay1, ax2, ay2, bx2, by2):
        return True
    return False


def _endpoint_distance(a1, a2, b1, b2) -> float:
    """Minimum over each endpoint's distance to the opposite segment."""
    return min(
        point_segment_distance(a1, b1, b2),
        point_segment_distance(a2, b1, b2),
        point_segment_distance(b1, a1, a2),
        point_segment_distance(b2, a1, a2),
    )


def segment_distance(
    a1,
    a2,
    b1,
    b2,
    eps: float = PARALLEL_EPS,
    metric: str = "clamped",
) -> float:
    """
    Approximate minimum distance between segment a1→a2 and segment b1→b2.

    Args:
        a1, a2: Endpoints of segment A.
        b1, b2: Endpoints of segment B.
        eps: Absolute threshold on the cross-product denominator below
             which the segments are treated as parallel. Ignored by the
             "exact" metric.
        metric: One of SEGMENT_METRICS (see module docstring).

    Returns:
        0.0 if the segments cross (touching counts), otherwise a positive
        distance between points on the two segments.

    Raises:
        ValueError: If metric is unknown.
    """
    if metric not in SEGMENT_METRICS:
        raise ValueError(f"Unknown segment metric: {metric}")

    if metric == "exact":
        if segments_cross(a1, a2, b1, b2):
            return 0.0
        return _endpoint_distance(a1, a2, b1, b2)

    ax, ay = as_point(a1)
    bx, by = as_point(b1)
    dx_a, dy_a = float(a2[0]) - ax, float(a2[1]) - ay
    dx_b, dy_b = float(b2[0]) - bx, float(b2[1]) - by

    # dA.y*dB.x - dA.x*dB.y, i.e. dB × dA
    den = cross2(dx_b, dy_b, dx_a, dy_a)
    if abs(den) < eps:
        if metric == "reference":
            return norm(dx_a, dy_a)
        if segments_cross(a1, a2, b1, b2):
            return 0.0
        return _endpoint_distance(a1, a2, b1, b2)

    wx, wy = ax - bx, ay - by
    t1 = cross2(wx, wy, dx_b, dy_b) / den
    t2 = cross2(wx, wy, dx_a, dy_a) / den

    if 0.0 <= t1 <= 1.0 and 0.0 <= t2 <= 1.0:
        return 0.0

    t1 = min(max(t1, 0.0), 1.0)
    t2 = min(max(t2, 0.0), 1.0)

    # Each clamped point is built from its own segment's base point.
    cx_a, cy_a = ax + dx_a * t1, ay + dy_a * t1
    cx_b, cy_b = bx + dx_b * t2, by + dy_b * t2
    return norm(cx_a - cx_b, cy_a - cy_b)


def exact_segment_distance(a1, a2, b1, b2) -> float:
    """True minimum distance between two finite segments."""
    return segment_distance(a1, a2, b1, b2, metric="exact")
