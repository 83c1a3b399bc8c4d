# MIT License (see LICENSE)
"""
collision_check - proximity check between a planned path and predicted paths.

Given an ego trajectory and the predicted trajectories of surrounding agents,
each with a circular safety radius, decide whether the ego path comes closer
to any of them than the combined radius. Trajectories are polylines of
sampled waypoints; every ego segment is measured against every agent segment.

Main entry points:
    - Scene, Agent, Trajectory: Input data model.
    - collision_check: Boolean verdict for a scene.
    - min_separation: Smallest distance margin in a scene.
    - CheckConfig: Segment metric, pairing mode and worker pool settings.

Submodules:
    - geometry: Point/segment distances and bounding-box culling.
    - evaluator: Pairwise and scene-level checks.
    - demos: Ready-made scenes.

Example:
    from collision_check import Scene, collision_check

    scene = Scene.from_paths([(0, 0), (1, 1)], 0.2, [([(0, 1), (1, 0)], 0.2)])
    collision_check(scene)   # True, the paths cross
"""
from .types import Trajectory, Agent, Scene
from .config import CheckConfig
from .errors import CollisionCheckError, InvalidInputError, CheckCancelled
from .evaluator import (
    pairwise_collision,
    pairwise_min_distance,
    collision_check,
    colliding_agents,
    min_separation,
)

__all__ = [
    # Data model
    "Trajectory",
    "Agent",
    "Scene",
    # Configuration
    "CheckConfig",
    # Errors
    "CollisionCheckError",
    "InvalidInputError",
    "CheckCancelled",
    # Evaluation
    "pairwise_collision",
    "pairwise_min_distance",
    "collision_check",
    "colliding_agents",
    "min_separation",
]
