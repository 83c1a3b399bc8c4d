from collision_check import Scene, CheckConfig, collision_check, colliding_agents, min_separation

scene = Scene.from_paths(
    [(0.0, 0.0), (1.0, 1.0), (2.0, 1.5), (3.0, 1.5)], 0.3,
    [
        ([(0.0, 1.0), (1.0, 0.0)], 0.3),        # crosses the first ego segment
        ([(5.0, 5.0), (6.0, 6.0)], 0.3),        # far away
        ([(3.0, 3.0), (2.0, 2.0), (1.0, 1.9)], 0.3),
    ],
)

print("collision:", collision_check(scene))
print("colliding agents:", colliding_agents(scene))
print("min separation:", min_separation(scene))

aligned = CheckConfig(pairing="time_aligned")
print("time-aligned collision:", collision_check(scene, aligned))
print("time-aligned colliding agents:", colliding_agents(scene, aligned))
