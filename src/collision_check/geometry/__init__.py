# MIT License (see LICENSE)
"""
Geometry kernel for the collision check.

This subpackage provides:
    - Distance: point-point, point-segment and segment-segment distances.
    - Broadphase: bounding-box culling of agent pairs.

Typical usage:
    from collision_check.geometry import segment_distance

    d = segment_distance((0, 0), (2, 2), (0, 2), (2, 0))   # 0.0, they cross
"""
from .distance import (
    SEGMENT_METRICS,
    point_distance,
    point_segment_distance,
    segment_distance,
    exact_segment_distance,
    segments_cross,
)
from .broadphase import trajectory_aabb, aabb_gap, may_collide

__all__ = [
    # Distance
    "SEGMENT_METRICS",
    "point_distance",
    "point_segment_distance",
    "segment_distance",
    "exact_segment_distance",
    "segments_cross",
    # Broadphase
    "trajectory_aabb",
    "aabb_gap",
    "may_collide",
]
