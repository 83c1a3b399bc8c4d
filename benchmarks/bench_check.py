"""
Microbenchmark: time per scene check vs number of agents and waypoints.
Run:
  python benchmarks/bench_check.py
"""
import time
from collision_check import CheckConfig, collision_check, min_separation
from collision_check.demos import random_scene

def run(n_agents: int, n_points: int, config: CheckConfig, repeats: int = 5):
    # small radius, large extent: most checks run to completion
    scene = random_scene(n_agents, n_points, radius=0.05, extent=1000.0)

    t0 = time.perf_counter()
    for _ in range(repeats):
        collision_check(scene, config)
    t1 = time.perf_counter()
    for _ in range(repeats):
        min_separation(scene, config)
    t2 = time.perf_counter()

    return (t1 - t0) / repeats, (t2 - t1) / repeats

if __name__ == "__main__":
    configs = {
        "serial": CheckConfig(),
        "no-broadphase": CheckConfig(broadphase=False),
        "4 workers": CheckConfig(workers=4),
    }
    for n_agents, n_points in [(5, 20), (20, 20), (20, 50), (50, 50)]:
        for name, config in configs.items():
            check, sep = run(n_agents, n_points, config)
            print(f"agents={n_agents:3d} points={n_points:3d} {name:14s} "
                  f"check={1e3*check:8.3f} ms  min_sep={1e3*sep:8.3f} ms")
        print()
