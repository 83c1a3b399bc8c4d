# MIT License (see LICENSE)
"""
Ready-made scenes for demos, benchmarks and tests.
"""
from __future__ import annotations

import numpy as np

from .types import Scene


def reference_scene() -> Scene:
    """
    The classic two-agent scene: an ego path and two agents further along
    the same diagonal, all with zero radius. Expected verdict: no collision.
    """
    return Scene.from_paths(
        [(1.0, 2.0), (2.0, 3.0)],
        0.0,
        [
            ([(4.0, 5.0), (5.0, 6.0)], 0.0),
            ([(6.0, 7.0), (7.0, 8.0)], 0.0),
        ],
    )


def random_scene(
    n_agents: int,
    n_points: int,
    radius: float = 0.5,
    extent: float = 100.0,
    seed: int = 12345,
) -> Scene:
    """
    Random-walk trajectories scattered over a square of side `extent`.

    Deterministic for a given seed.

    Raises:
        ValueError: If n_points is less than 1.
    """
    if n_points < 1:
        raise ValueError(f"n_points must be at least 1, got {n_points}")
    rng = np.random.default_rng(seed)

    def walk() -> np.ndarray:
        start = rng.uniform(0.0, extent, size=2)
        steps = rng.normal(0.0, 1.0, size=(n_points - 1, 2))
        return np.vstack([start, start + np.cumsum(steps, axis=0)])

    return Scene.from_paths(walk(), radius, [(walk(), radius) for _ in range(n_agents)])
