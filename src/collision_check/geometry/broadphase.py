# MIT License (see LICENSE)
"""
Bounding-box culling of agent pairs.

Before running the segment-pair loop, the axis-aligned bounding boxes
(AABBs) of the two trajectories are compared. The gap between two boxes is a
lower bound on the distance between any point of one trajectory and any
point of the other, so a gap of at least the combined radius rules out every
segment pair at once.

The test is only sound for segment metrics that never under-estimate the
true distance ("clamped" and "exact").
"""
from __future__ import annotations

from ..types import Agent
from ..util import norm

AABB = tuple[float, float, float, float]


def trajectory_aabb(agent: Agent) -> AABB | None:
    """
    Calculate the AABB (min_x, min_y, max_x, max_y) of an agent's waypoints.

    The radius is not included. Returns None for an empty trajectory.
    """
    return agent.trajectory.aabb()


def aabb_gap(a: AABB, b: AABB) -> float:
    """
    Euclidean gap between two boxes.

    Returns 0.0 when the boxes touch or overlap.
    """
    ax0, ay0, ax1, ay1 = a
    bx0, by0, bx1, by1 = b
    gx = max(bx0 - ax1, ax0 - bx1, 0.0)
    gy = max(by0 - ay1, ay0 - by1, 0.0)
    return norm(gx, gy)


def may_collide(ego: Agent, agent: Agent) -> bool:
    """
    Conservative pre-check for a pair of agents.

    Returns False only if no segment of one trajectory can come within the
    combined radius of a segment of the other. Agents without segments are
    left to the narrow phase, which resolves them to "no collision".
    """
    box_e = trajectory_aabb(ego)
    box_a = trajectory_aabb(agent)
    if box_e is None or box_a is None:
        return True

    gap = aabb_gap(box_e, box_a)
    return gap == 0.0 or gap < ego.radius + agent.radius
