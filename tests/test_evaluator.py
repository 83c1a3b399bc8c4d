import math
import pytest
from collision_check.types import Agent, Scene
from collision_check.config import CheckConfig
from collision_check.demos import reference_scene
from collision_check.evaluator import (
    pairwise_collision,
    pairwise_min_distance,
    collision_check,
    colliding_agents,
    min_separation,
)

METRICS = ("clamped", "reference", "exact")

def test_reference_scene_no_collision():
    scene = reference_scene()
    for metric in METRICS:
        assert collision_check(scene, CheckConfig(metric=metric)) is False

def test_well_separated_paths():
    ego = Agent([(1, 2), (2, 3)], 0.0)
    other = Agent([(4, 5), (5, 6)], 0.0)
    for metric in METRICS:
        assert pairwise_collision(ego, other, CheckConfig(metric=metric)) is False

@pytest.mark.parametrize("r_ego,r_agent", [(0.0, 0.0), (0.25, 0.0), (0.5, 0.5)])
def test_crossing_paths_always_collide(r_ego, r_agent):
    """(0,0)-(1,1) and (0,1)-(1,0) cross at (0.5, 0.5)."""
    scene = Scene.from_paths([(0, 0), (1, 1)], r_ego, [([(0, 1), (1, 0)], r_agent)])
    for metric in METRICS:
        assert collision_check(scene, CheckConfig(metric=metric)) is True

@pytest.mark.parametrize("path", [[], [(0.5, 0.5)]])
def test_degenerate_trajectory_never_collides(path):
    crossing = Agent([(0, 0), (1, 1)], 100.0)
    short = Agent(path, 100.0)
    for metric in METRICS:
        config = CheckConfig(metric=metric)
        assert pairwise_collision(crossing, short, config) is False
        assert pairwise_collision(short, crossing, config) is False
        assert pairwise_collision(short, short, config) is False
    assert pairwise_min_distance(crossing, short) == math.inf

def test_radius_threshold_is_strict():
    # Minimum distance between the paths is exactly 1.0
    ego = [(0, 0), (4, 0)]
    other = [(0, 1), (4, 1.5)]
    assert pairwise_min_distance(Agent(ego), Agent(other)) == pytest.approx(1.0)

    for broadphase in (True, False):
        config = CheckConfig(broadphase=broadphase)
        assert pairwise_collision(Agent(ego, 0.5), Agent(other, 0.5), config) is False
        assert pairwise_collision(Agent(ego, 0.5), Agent(other, 0.51), config) is True

def test_radius_monotonicity():
    ego = [(0, 0), (2, 0.5), (4, 0)]
    other = [(0, 2), (2, 1.2), (4, 3)]
    seen_collision = False
    for i in range(41):
        r = 0.05 * i
        hit = pairwise_collision(Agent(ego, r / 2), Agent(other, r / 2))
        if seen_collision:
            assert hit, f"collision lost when combined radius grew to {r}"
        seen_collision = seen_collision or hit
    assert seen_collision

def test_scene_or_semantics():
    scene = Scene.from_paths([(0, 0), (1, 1)], 0.1, [([(10, 10), (11, 10)], 0.1)])
    assert collision_check(scene) is False

    # Far-away agent keeps a negative verdict negative
    scene.add_agent([(-20, -20), (-21, -22)], 0.1)
    assert collision_check(scene) is False

    scene.add_agent([(0, 1), (1, 0)], 0.1)
    assert collision_check(scene) is True

    # ...and a positive verdict positive
    scene.add_agent([(50, 50), (60, 60)], 0.1)
    assert collision_check(scene) is True
    assert colliding_agents(scene) == [2]

def test_empty_surroundings():
    scene = Scene.from_paths([(0, 0), (1, 1)], 1.0)
    assert collision_check(scene) is False
    assert colliding_agents(scene) == []
    assert min_separation(scene) == math.inf

def test_multi_segment_crossing():
    # Only the third ego segment crosses the agent path
    scene = Scene.from_paths(
        [(0, 0), (1, 0), (2, 0), (3, 0)], 0.0,
        [([(2.5, -1), (2.5, -0.5), (2.5, 1)], 0.0)],
    )
    assert collision_check(scene) is True

def test_min_separation():
    crossing = Scene.from_paths([(0, 0), (1, 1)], 0.25, [([(0, 1), (1, 0)], 0.25)])
    assert min_separation(crossing) == pytest.approx(-0.5)

    # Collinear agents along the ego diagonal; closest endpoints (2,3)-(4,5)
    assert min_separation(reference_scene()) == pytest.approx(2.0 * math.sqrt(2.0))

def test_min_separation_skips_degenerate_agents():
    scene = Scene.from_paths([(0, 0), (1, 0)], 0.5, [([(0, 0)], 0.5), ([(0, 3), (1, 3)], 0.5)])
    assert min_separation(scene) == pytest.approx(2.0)

def test_time_aligned_pairing():
    """
    The agent crosses the second ego segment during its own first segment,
    so the paths overlap in space but not at the same time index.
    """
    scene = Scene.from_paths(
        [(0, 0), (1, 0), (2, 0)], 0.0,
        [([(1.5, -1), (1.5, 1), (10, 10)], 0.0)],
    )
    aligned = CheckConfig(pairing="time_aligned")

    assert collision_check(scene) is True
    assert collision_check(scene, aligned) is False
    assert pairwise_min_distance(scene.ego, scene.surroundings[0], aligned) == pytest.approx(0.5)

def test_time_aligned_uses_common_range():
    ego = Agent([(0, 0), (1, 0)], 0.0)
    other = Agent([(5, 5), (6, 6), (0.5, -1), (0.5, 1)], 0.0)
    aligned = CheckConfig(pairing="time_aligned")
    assert pairwise_collision(ego, other) is True
    assert pairwise_collision(ego, other, aligned) is False

def test_reference_metric_zero_length_segment():
    """
    The endpoint-length parallel fallback measures a repeated ego waypoint
    as distance 0, so it conflicts with anything.
    """
    scene = Scene.from_paths([(0, 0), (0, 0)], 0.1, [([(5, 5), (6, 5)], 0.1)])
    assert collision_check(scene) is False
    assert collision_check(scene, CheckConfig(metric="reference")) is True

def test_evaluation_does_not_mutate_scene():
    scene = Scene.from_paths([(0, 0), (1, 1)], 0.3, [([(0, 1), (1, 0)], 0.3)])
    before = scene.ego.trajectory.points.copy()
    collision_check(scene)
    min_separation(scene)
    assert (scene.ego.trajectory.points == before).all()
    assert len(scene.surroundings) == 1

@pytest.mark.parametrize("ego,other", [
    ([(0, 0), (0.005, 0.005)], [(0, 0.005), (0.005, 0)]),
    ([(0, 0), (100, 0)], [(0, -5e-7), (100, 5e-7)]),
])
def test_ill_conditioned_crossings_collide(ego, other):
    """Short or nearly parallel crossing segments still collide at zero radius."""
    scene = Scene.from_paths(ego, 0.0, [(other, 0.0)])
    assert collision_check(scene) is True
    assert collision_check(scene, CheckConfig(metric="exact")) is True
    assert min_separation(scene) == 0.0
