# MIT License (see LICENSE)
"""
Result record for one vehicle-path / obstacle intersection test.

A PathIntersection is created fresh by every intersection test and never
shared between queries. It also knows how to turn itself into an
avoidance steering force.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

import numpy as np

from ..constants import zero3
from ..util import unit, perpendicular_component

if TYPE_CHECKING:
    from ..vehicle import AbstractVehicle
    from .base import Obstacle

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class PathIntersection:
    """
    Outcome of testing a vehicle's forward ray against one obstacle.

    Attributes:
        intersect: True if the forward path hits the obstacle.
        distance: Distance along the path to the hit (>= 0). Only
                  meaningful when intersect is True.
        surface_point: World-space point where the hit occurs.
        surface_normal: World-space normal at the hit, facing the vehicle.
        steer_hint: Direction fed into steer_to_avoid_if_needed(). Equals
                    surface_normal for spheres; panels bias it toward the
                    nearer free edge.
        obstacle: The obstacle that produced the hit (not owned).

    Note:
        When intersect is False the remaining fields hold placeholder
        values and must not be relied on.
    """
    intersect: bool = False
    distance: float = 0.0
    surface_point: np.ndarray = field(default_factory=zero3)
    surface_normal: np.ndarray = field(default_factory=zero3)
    steer_hint: np.ndarray = field(default_factory=zero3)
    obstacle: Obstacle | None = None

    def steer_to_avoid_if_needed(
        self,
        vehicle: AbstractVehicle,
        min_time_to_collision: float,
    ) -> np.ndarray:
        """
        Steering force that avoids this intersection, or zero.

        Steering is needed when the hit lies closer than the distance the
        vehicle covers in min_time_to_collision. The force is the part of
        steer_hint perpendicular to the vehicle's forward direction,
        rescaled to the vehicle's max force.

        Args:
            vehicle: The vehicle the intersection was computed for.
            min_time_to_collision: Look-ahead time in seconds.

        Returns:
            Force vector [x, y, z]. Zero when there is no intersection,
            the hit is far enough away, or steer_hint is parallel to
            forward (no lateral direction to steer in).
        """
        min_distance_to_collision = min_time_to_collision * vehicle.speed()
        if not (self.intersect and self.distance < min_distance_to_collision):
            return zero3()

        lateral = unit(perpendicular_component(self.steer_hint, vehicle.forward()))
        if not lateral.any():
            logger.debug("Steer hint parallel to forward at distance %.3f; no lateral steering",
                         self.distance)
            return zero3()

        logger.debug("Avoiding %r at distance %.3f (threshold %.3f)",
                     self.obstacle, self.distance, min_distance_to_collision)
        return lateral * vehicle.max_force()
