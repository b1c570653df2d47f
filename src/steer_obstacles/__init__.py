# MIT License (see LICENSE)
"""
steer_obstacles - obstacle intersection and avoidance steering.

Given a vehicle moving along its forward direction, this package decides
whether the straight-line path ahead hits an obstacle and, if the hit is
close enough, produces a lateral steering force that pushes the vehicle
around it.

Main entry points:
    - SphericalObstacle, PlaneObstacle, RectangleObstacle, BoxObstacle:
      obstacle variants with find_intersection_with_vehicle_path().
    - steer_to_avoid_obstacles: avoidance force for a group of obstacles.
    - SimpleVehicle: a ready-made vehicle value.
    - AvoidanceConfig: tunables, loadable from the environment.

Submodules:
    - obstacles: Obstacle variants, PathIntersection, group queries.
    - local_space: Local coordinate frames.
    - vehicle: Vehicle interface and SimpleVehicle.
    - io: JSON serialization of obstacle sets.

Example:
    from steer_obstacles import SimpleVehicle, SphericalObstacle, steer_to_avoid_obstacles

    vehicle = SimpleVehicle(position=(0, 0, 0), forward=(0, 0, 1), speed=5.0)
    rock = SphericalObstacle(center=(0.5, 0, 10), radius=2)
    force = steer_to_avoid_obstacles(vehicle, 3.0, [rock])
"""
from .config import AvoidanceConfig
from .local_space import LocalSpace
from .vehicle import AbstractVehicle, SimpleVehicle
from .obstacles import (
    Obstacle,
    ObstacleGroup,
    SeenFrom,
    PathIntersection,
    SphericalObstacle,
    PlaneObstacle,
    RectangleObstacle,
    BoxObstacle,
    first_path_intersection_with_obstacle_group,
    steer_to_avoid_obstacles,
)

__all__ = [
    # Configuration
    "AvoidanceConfig",
    # Frames and vehicles
    "LocalSpace",
    "AbstractVehicle",
    "SimpleVehicle",
    # Obstacles
    "Obstacle",
    "ObstacleGroup",
    "SeenFrom",
    "PathIntersection",
    "SphericalObstacle",
    "PlaneObstacle",
    "RectangleObstacle",
    "BoxObstacle",
    # Queries
    "first_path_intersection_with_obstacle_group",
    "steer_to_avoid_obstacles",
]
