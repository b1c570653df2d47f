# MIT License (see LICENSE)
"""
Obstacle variants and obstacle-group queries.

This subpackage provides:
    - SeenFrom: which side of an obstacle blocks a vehicle.
    - PathIntersection: result of one path/obstacle test.
    - Obstacle: abstract base with the steering entry points.
    - SphericalObstacle, PlaneObstacle, RectangleObstacle, BoxObstacle.
    - Group queries: nearest hit and avoidance steering over many obstacles.

Typical usage:
    from steer_obstacles.obstacles import SphericalObstacle, steer_to_avoid_obstacles

    obstacles = [SphericalObstacle(center=(0, 0, 10), radius=2)]
    force = steer_to_avoid_obstacles(vehicle, 2.0, obstacles)
"""
from .base import (
    Obstacle,
    ObstacleGroup,
    SeenFrom,
    first_path_intersection_with_obstacle_group,
    steer_to_avoid_obstacles,
)
from .intersection import PathIntersection
from .sphere import SphericalObstacle
from .plane import PlaneObstacle, RectangleObstacle
from .box import BoxObstacle

__all__ = [
    # Base
    "Obstacle",
    "ObstacleGroup",
    "SeenFrom",
    "PathIntersection",
    # Variants
    "SphericalObstacle",
    "PlaneObstacle",
    "RectangleObstacle",
    "BoxObstacle",
    # Group queries
    "first_path_intersection_with_obstacle_group",
    "steer_to_avoid_obstacles",
]
