import pytest
from collision_check.types import Agent
from collision_check.config import CheckConfig
from collision_check.demos import random_scene
from collision_check.evaluator import collision_check, colliding_agents
from collision_check.geometry.broadphase import aabb_gap, may_collide, trajectory_aabb

def test_aabb_gap():
    assert aabb_gap((0, 0, 2, 2), (1, 1, 3, 3)) == 0.0
    assert aabb_gap((0, 0, 1, 1), (1, 0, 2, 1)) == 0.0
    assert aabb_gap((0, 0, 1, 1), (3, 0, 4, 1)) == pytest.approx(2.0)
    # Diagonal gap (3, 4)
    assert aabb_gap((0, 0, 1, 1), (4, 5, 6, 7)) == pytest.approx(5.0)
    assert aabb_gap((4, 5, 6, 7), (0, 0, 1, 1)) == pytest.approx(5.0)

def test_trajectory_aabb():
    assert trajectory_aabb(Agent([(3, 1), (0, 2)], 1.0)) == pytest.approx((0.0, 1.0, 3.0, 2.0))
    assert trajectory_aabb(Agent([], 1.0)) is None

def test_may_collide():
    ego = Agent([(0, 0), (1, 0)], 0.5)
    assert may_collide(ego, Agent([(0, 3), (1, 3)], 0.5)) is False
    assert may_collide(ego, Agent([(0, 3), (1, 3)], 2.6)) is True
    # Touching boxes always go to the narrow phase
    assert may_collide(Agent([(0, 0), (1, 1)]), Agent([(1, 1), (2, 0)])) is True
    # Empty trajectories are left to the narrow phase
    assert may_collide(ego, Agent([], 0.5)) is True

@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_broadphase_preserves_verdicts(seed):
    scene = random_scene(12, 15, radius=1.5, extent=40.0, seed=seed)
    for metric in ("clamped", "exact"):
        with_bp = CheckConfig(metric=metric)
        without_bp = CheckConfig(metric=metric, broadphase=False)
        assert colliding_agents(scene, with_bp) == colliding_agents(scene, without_bp)
        assert collision_check(scene, with_bp) == collision_check(scene, without_bp)
