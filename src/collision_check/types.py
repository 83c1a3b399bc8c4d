# MIT License (see LICENSE)
"""
Core type definitions for the trajectory collision check.

Defines the data handed to the evaluator by the caller:
- Trajectory: ordered 2D waypoints, index order = chronological order.
- Agent: a trajectory plus a circular safety radius.
- Scene: one ego agent and the surrounding agents it is checked against.

Consecutive waypoints form the segments that are compared. A trajectory with
fewer than two waypoints has no segments and never contributes a collision.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

import numpy as np

from .errors import InvalidInputError
from .util import as_points


# Anything indexable as p[0], p[1]: tuples, lists or numpy arrays of shape (2,).
Point = Sequence[float] | np.ndarray


# =============================================================================
# Trajectory
# =============================================================================

@dataclass(frozen=True, eq=False)
class Trajectory:
    """
    Sampled waypoints of one agent's path.

    Attributes:
        points: Read-only float64 array of shape (N, 2). Accepts any
                array-like of (x, y) pairs on construction.
    """
    points: np.ndarray

    def __post_init__(self) -> None:
        """Coerce points to a validated, read-only float64 array."""
        object.__setattr__(self, "points", as_points(self.points))

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def num_segments(self) -> int:
        """Number of consecutive-waypoint segments (0 for fewer than 2 points)."""
        return max(len(self) - 1, 0)

    def segment(self, i: int) -> tuple[np.ndarray, np.ndarray]:
        """Return the endpoints (p_i, p_{i+1}) of segment i."""
        if not 0 <= i < self.num_segments:
            raise IndexError(f"Segment index {i} out of range for {self.num_segments} segments")
        return self.points[i], self.points[i + 1]

    def segments(self) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        """Yield every segment as an endpoint pair, in chronological order."""
        pts = self.points
        for i in range(self.num_segments):
            yield pts[i], pts[i + 1]

    def aabb(self) -> tuple[float, float, float, float] | None:
        """Bounding box (min_x, min_y, max_x, max_y), or None when empty."""
        if len(self) == 0:
            return None
        lo = self.points.min(axis=0)
        hi = self.points.max(axis=0)
        return (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


# =============================================================================
# Agent
# =============================================================================

@dataclass(frozen=True)
class Agent:
    """
    A moving agent modelled as a circle swept along its trajectory.

    Attributes:
        trajectory: The agent's waypoints. Plain point sequences are wrapped
                    in a Trajectory.
        radius: Safety radius in the trajectory's length unit. Must be
                finite and non-negative; it is never clamped.
    """
    trajectory: Trajectory
    radius: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.trajectory, Trajectory):
            object.__setattr__(self, "trajectory", Trajectory(self.trajectory))

        try:
            radius = float(self.radius)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Radius must be a number, got {self.radius!r}") from exc
        if not np.isfinite(radius) or radius < 0:
            raise InvalidInputError(f"Radius must be finite and non-negative, got {radius}")
        object.__setattr__(self, "radius", radius)


# =============================================================================
# Scene
# =============================================================================

@dataclass
class Scene:
    """
    Unit of evaluation: an ego agent and the agents around it.

    Attributes:
        ego: The agent whose planned path is being checked.
        surroundings: Agents with predicted paths, checked in order.

    Example:
        scene = Scene.from_paths([(0, 0), (1, 1)], 0.5, [([(0, 1), (1, 0)], 0.5)])
        collision_check(scene)
    """
    ego: Agent
    surroundings: list[Agent] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.ego, Agent):
            raise InvalidInputError(f"Scene ego must be an Agent, got {type(self.ego).__name__}")
        self.surroundings = list(self.surroundings)
        for i, agent in enumerate(self.surroundings):
            if not isinstance(agent, Agent):
                raise InvalidInputError(
                    f"Surrounding agent {i} must be an Agent, got {type(agent).__name__}"
                )

    @classmethod
    def from_paths(
        cls,
        ego_path: Iterable[Point],
        ego_radius: float,
        others: Iterable[tuple[Iterable[Point], float]] = (),
    ) -> "Scene":
        """
        Build a scene from raw paths and radii.

        Args:
            ego_path: Ego waypoints as (x, y) pairs.
            ego_radius: Ego safety radius.
            others: Iterable of (path, radius) for the surrounding agents.
        """
        ego = Agent(Trajectory(ego_path), ego_radius)
        return cls(ego, [Agent(Trajectory(path), radius) for path, radius in others])

    def add_agent(self, path: Iterable[Point], radius: float) -> Agent:
        """Append a surrounding agent and return it."""
        agent = Agent(Trajectory(path), radius)
        self.surroundings.append(agent)
        return agent
