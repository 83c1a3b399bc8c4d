# MIT License (see LICENSE)
"""
Reduce a Scene to a collision verdict.

For each surrounding agent, both trajectories are split into
consecutive-waypoint segments and segment pairs are measured with the
geometry kernel. A pair conflicts when its distance is below the combined
safety radius, or when the two segments touch (distance 0) so that crossing
paths collide even with zero radii.

Pairing modes:
    - "all": every ego segment against every agent segment. Detects any
      overlap of the two swept paths, including crossings at different
      times (conservative, may give false positives).
    - "time_aligned": ego segment i against agent segment i only, over the
      common index range.

All functions are pure: they read the scene and never modify it.
"""
from __future__ import annotations
import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterator

from .config import CheckConfig
from .errors import CheckCancelled
from .geometry.broadphase import may_collide
from .geometry.distance import segment_distance
from .types import Agent, Scene

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = CheckConfig()


def _pair_distances(a: Agent, b: Agent, config: CheckConfig) -> Iterator[float]:
    """Yield the segment distance of every pair selected by the pairing mode."""
    pa = a.trajectory.points
    pb = b.trajectory.points
    na = a.trajectory.num_segments
    nb = b.trajectory.num_segments
    eps, metric = config.parallel_eps, config.metric

    if config.pairing == "time_aligned":
        for i in range(min(na, nb)):
            yield segment_distance(pa[i], pa[i + 1], pb[i], pb[i + 1], eps, metric)
        return

    for i in range(na):
        for j in range(nb):
            yield segment_distance(pa[i], pa[i + 1], pb[j], pb[j + 1], eps, metric)


def _conflicts(dist: float, safe: float) -> bool:
    return dist < safe or dist == 0.0


def pairwise_collision(a: Agent, b: Agent, config: CheckConfig | None = None) -> bool:
    """
    Check whether the paths of two agents come within their combined radius.

    Stops at the first conflicting segment pair. Agents with fewer than two
    waypoints have no segments and never collide.

    Args:
        a: First agent (usually the ego).
        b: Second agent.
        config: Evaluation options. Defaults to CheckConfig().

    Returns:
        True if any selected segment pair conflicts.
    """
    config = config or DEFAULT_CONFIG
    if config.use_broadphase and not may_collide(a, b):
        logger.debug("Bounding boxes too far apart, skipping segment pairs")
        return False

    safe = a.radius + b.radius
    for dist in _pair_distances(a, b, config):
        if _conflicts(dist, safe):
            return True
    return False


def pairwise_min_distance(a: Agent, b: Agent, config: CheckConfig | None = None) -> float:
    """
    Minimum raw segment distance between two agents' paths.

    Radii are not subtracted. Returns math.inf when either agent has no
    segments (or, time-aligned, no common segment index).
    """
    config = config or DEFAULT_CONFIG
    return min(_pair_distances(a, b, config), default=math.inf)


def collision_check(
    scene: Scene,
    config: CheckConfig | None = None,
    cancel: threading.Event | None = None,
) -> bool:
    """
    Check the ego path of a scene against every surrounding agent.

    Args:
        scene: Ego agent and surrounding agents.
        config: Evaluation options. With config.workers > 1 the agents are
                evaluated on a thread pool.
        cancel: Optional event set by the caller to abandon the check.

    Returns:
        True as soon as any surrounding agent collides with the ego.

    Raises:
        CheckCancelled: If cancel is set before a verdict is reached.
    """
    config = config or DEFAULT_CONFIG
    if config.workers > 1 and len(scene.surroundings) > 1:
        return _collision_check_pooled(scene, config, cancel)

    for k, agent in enumerate(scene.surroundings):
        if cancel is not None and cancel.is_set():
            raise CheckCancelled(f"Collision check cancelled after {k} agents")
        if pairwise_collision(scene.ego, agent, config):
            logger.debug("Ego path conflicts with agent %d", k)
            return True
    return False


def _collision_check_pooled(
    scene: Scene,
    config: CheckConfig,
    cancel: threading.Event | None,
) -> bool:
    """
    Evaluate agents concurrently and OR the results.

    A one-shot event, set by the first worker that finds a collision, makes
    the remaining workers return without measuring. Workers skipped because
    of the caller's cancel event report None.
    """
    found = threading.Event()
    ego = scene.ego

    def check_agent(agent: Agent) -> bool | None:
        if found.is_set():
            return False
        if cancel is not None and cancel.is_set():
            return None
        hit = pairwise_collision(ego, agent, config)
        if hit:
            found.set()
        return hit

    skipped = False
    workers = min(config.workers, len(scene.surroundings))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(check_agent, agent): k for k, agent in enumerate(scene.surroundings)}
        for future in as_completed(futures):
            result = future.result()
            if result:
                logger.debug("Ego path conflicts with agent %d", futures[future])
                for other in futures:
                    other.cancel()
                return True
            if result is None:
                skipped = True

    if skipped:
        raise CheckCancelled("Collision check cancelled before all agents were evaluated")
    return False


def colliding_agents(scene: Scene, config: CheckConfig | None = None) -> list[int]:
    """Indices of all surrounding agents whose paths conflict with the ego."""
    config = config or DEFAULT_CONFIG
    return [
        k for k, agent in enumerate(scene.surroundings)
        if pairwise_collision(scene.ego, agent, config)
    ]


def min_separation(scene: Scene, config: CheckConfig | None = None) -> float:
    """
    Smallest margin between the ego path and any surrounding path.

    The margin of a segment pair is its distance minus the combined radius;
    negative values mean the safety circles overlap. Returns math.inf when no
    agent contributes a segment pair. Bounding-box culling is never applied.
    """
    config = config or DEFAULT_CONFIG
    best = math.inf
    for agent in scene.surroundings:
        dist = pairwise_min_distance(scene.ego, agent, config)
        if dist == math.inf:
            continue
        best = min(best, dist - (scene.ego.radius + agent.radius))
    return best
