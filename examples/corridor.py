# examples/corridor.py
# A vehicle drives down a corridor of two walls with a box in the way.
# Each step it steers around the nearest obstacle ahead.
import numpy as np

from steer_obstacles import (
    AvoidanceConfig,
    BoxObstacle,
    LocalSpace,
    RectangleObstacle,
    SimpleVehicle,
)

config = AvoidanceConfig.from_env()

obstacles = [
    RectangleObstacle(space=LocalSpace.from_forward((1, 0, 0), position=(-5, 0, 25)),
                      width=50, height=4),
    RectangleObstacle(space=LocalSpace.from_forward((-1, 0, 0), position=(5, 0, 25)),
                      width=50, height=4),
    BoxObstacle(width=3, height=3, depth=3, space=LocalSpace(position=(0.5, 0, 20))),
]

position = np.zeros(3)
velocity = np.array([0.0, 0.0, 4.0])
dt = 0.1

for step in range(120):
    speed = float(np.linalg.norm(velocity))
    vehicle = SimpleVehicle(position=position, forward=velocity, speed=speed,
                            radius=0.5, max_force=6.0)
    force = config.steer_to_avoid_obstacles(vehicle, obstacles)

    velocity = velocity + force * dt
    velocity = velocity / np.linalg.norm(velocity) * 4.0
    position = position + velocity * dt

    if step % 10 == 0:
        print(f"t={step * dt:4.1f}  pos={np.round(position, 2)}  force={np.round(force, 2)}")
