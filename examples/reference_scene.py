from collision_check import collision_check
from collision_check.demos import reference_scene

scene = reference_scene()

if collision_check(scene):
    print("collision")
else:
    print("No collision")
