# MIT License (see LICENSE)
"""
Obstacle base class and group-level queries.

Every obstacle variant implements find_intersection_with_vehicle_path().
The steering entry points and the nearest-hit scan over a group are
shared and defined here.

An obstacle group is any ordered iterable of Obstacle references. The
scan never mutates it; callers must not mutate it during a query.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from .intersection import PathIntersection

if TYPE_CHECKING:
    from ..vehicle import AbstractVehicle

logger = logging.getLogger(__name__)


class SeenFrom(str, Enum):
    """
    Which side of an obstacle registers a collision.

    OUTSIDE: solid obstacle, only the exterior surface blocks.
    INSIDE:  hollow obstacle, only the interior surface blocks.
    BOTH:    thin, double-sided obstacle.
    """
    OUTSIDE = "outside"
    INSIDE = "inside"
    BOTH = "both"


@dataclass(eq=False)
class Obstacle(ABC):
    """
    Abstract obstacle.

    Obstacles compare by identity so they can be stored in sets and used
    as dict keys by the surrounding scene.

    Attributes:
        seen_from: Which side(s) of the obstacle block a vehicle.
    """
    seen_from: SeenFrom = field(default=SeenFrom.OUTSIDE, kw_only=True)

    def __post_init__(self) -> None:
        self.seen_from = SeenFrom(self.seen_from)

    @abstractmethod
    def find_intersection_with_vehicle_path(self, vehicle: AbstractVehicle) -> PathIntersection:
        """
        Find the first point where the vehicle's forward path hits this obstacle.

        Returns:
            A new PathIntersection; intersect is False when the path is clear.
        """
        ...

    def steer_to_avoid(self, vehicle: AbstractVehicle, min_time_to_collision: float) -> np.ndarray:
        """Steering force to avoid this obstacle, zero if not needed."""
        pi = self.find_intersection_with_vehicle_path(vehicle)
        return pi.steer_to_avoid_if_needed(vehicle, min_time_to_collision)

    @staticmethod
    def steer_to_avoid_obstacles(
        vehicle: AbstractVehicle,
        min_time_to_collision: float,
        obstacles: Iterable[Obstacle],
    ) -> np.ndarray:
        """See steer_to_avoid_obstacles()."""
        return steer_to_avoid_obstacles(vehicle, min_time_to_collision, obstacles)

    @staticmethod
    def first_path_intersection_with_obstacle_group(
        vehicle: AbstractVehicle,
        obstacles: Iterable[Obstacle],
    ) -> tuple[PathIntersection, PathIntersection]:
        """See first_path_intersection_with_obstacle_group()."""
        return first_path_intersection_with_obstacle_group(vehicle, obstacles)


ObstacleGroup = Sequence[Obstacle]


def first_path_intersection_with_obstacle_group(
    vehicle: AbstractVehicle,
    obstacles: Iterable[Obstacle],
) -> tuple[PathIntersection, PathIntersection]:
    """
    Find the nearest obstacle hit along the vehicle's forward path.

    Tests every obstacle in iteration order. The current result replaces
    the nearest one if nothing has been recorded yet, or if it is a hit
    strictly closer than the nearest so far. On exact distance ties the
    first obstacle found wins.

    Args:
        vehicle: The vehicle whose path is tested.
        obstacles: Ordered group of obstacles (may be empty).

    Returns:
        Tuple (nearest, next) where nearest is the selected intersection
        (intersect False if nothing was hit) and next is the result of the
        last test performed.
    """
    nearest = PathIntersection()
    next_ = PathIntersection()
    for obstacle in obstacles:
        next_ = obstacle.find_intersection_with_vehicle_path(vehicle)

        first_found = not nearest.intersect
        nearest_found = next_.intersect and next_.distance < nearest.distance
        if first_found or nearest_found:
            nearest = next_
        if next_.intersect:
            logger.debug("Path hits %r at distance %.3f", obstacle, next_.distance)

    if nearest.intersect:
        logger.debug("Nearest obstacle %r at distance %.3f", nearest.obstacle, nearest.distance)
    return nearest, next_


def steer_to_avoid_obstacles(
    vehicle: AbstractVehicle,
    min_time_to_collision: float,
    obstacles: Iterable[Obstacle],
) -> np.ndarray:
    """
    Steering force to avoid the nearest obstacle in a group.

    Args:
        vehicle: The steering vehicle.
        min_time_to_collision: Look-ahead time in seconds.
        obstacles: Ordered group of obstacles.

    Returns:
        Force vector, zero if no obstacle is close enough ahead.
    """
    nearest, _ = first_path_intersection_with_obstacle_group(vehicle, obstacles)
    return nearest.steer_to_avoid_if_needed(vehicle, min_time_to_collision)
