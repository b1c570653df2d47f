# MIT License (see LICENSE)
"""
Planar obstacles: unbounded planes and rectangular panels.

Both are the XY plane of their own LocalSpace, with the plane normal along
local +Z (the frame's forward axis). The ray/plane test is shared; shapes
differ only in xy_point_inside_shape(), which decides whether the point
where the path crosses the plane lies on the obstacle.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from ..local_space import LocalSpace
from ..util import unit, norm
from .base import Obstacle, SeenFrom
from .intersection import PathIntersection

if TYPE_CHECKING:
    from ..vehicle import AbstractVehicle


@dataclass(eq=False)
class PlaneObstacle(Obstacle):
    """
    Infinite plane through space.position, normal to space.forward.

    The outside of the plane is the half-space local z > 0.

    Attributes:
        space: Local frame of the plane.
        seen_from: Which side blocks; planes default to BOTH.
    """
    seen_from: SeenFrom = field(default=SeenFrom.BOTH, kw_only=True)
    space: LocalSpace = field(default_factory=LocalSpace)

    @property
    def side(self) -> np.ndarray:
        return self.space.side

    @property
    def up(self) -> np.ndarray:
        return self.space.up

    @property
    def forward(self) -> np.ndarray:
        return self.space.forward

    @property
    def position(self) -> np.ndarray:
        return self.space.position

    def xy_point_inside_shape(self, point: np.ndarray, radius: float) -> bool:
        """Whether a local-space point on the plane lies on the obstacle."""
        return True

    def find_intersection_with_vehicle_path(self, vehicle: AbstractVehicle) -> PathIntersection:
        """
        Intersect the vehicle's forward ray with this planar obstacle.

        The path is localized into the obstacle's frame. It is rejected if
        it runs parallel to the plane, if it heads away from the plane, or
        if it approaches from a side the obstacle is not seen from.
        """
        pi = PathIntersection()

        lp = self.space.localize_position(vehicle.position())
        ld = self.space.localize_direction(vehicle.forward())

        # parallel to the plane
        if ld[2] == 0.0:
            return pi

        # heading away from the plane
        if lp[2] > 0.0 and ld[2] > 0.0:
            return pi
        if lp[2] < 0.0 and ld[2] < 0.0:
            return pi

        # approaching from a side that does not block
        if self.seen_from is SeenFrom.OUTSIDE and lp[2] < 0.0:
            return pi
        if self.seen_from is SeenFrom.INSIDE and lp[2] > 0.0:
            return pi

        # where the path crosses the local XY plane
        ix = lp[0] - (ld[0] * lp[2] / ld[2])
        iy = lp[1] - (ld[1] * lp[2] / ld[2])
        plane_intersection = np.array([ix, iy, 0.0], dtype=np.float64)

        if not self.xy_point_inside_shape(plane_intersection, vehicle.radius()):
            return pi

        # bias steering toward the nearer free edge
        gpin = self.space.globalize_direction(unit(plane_intersection))
        side_sign = 1.0 if lp[2] > 0.0 else -1.0
        opposing_normal = self.space.forward * side_sign

        pi.intersect = True
        pi.obstacle = self
        pi.distance = norm(lp - plane_intersection)
        pi.steer_hint = opposing_normal + gpin
        pi.surface_point = self.space.globalize_position(plane_intersection)
        pi.surface_normal = opposing_normal
        return pi


@dataclass(eq=False)
class RectangleObstacle(PlaneObstacle):
    """
    Flat rectangular panel centered on space.position.

    Attributes:
        width: Extent along the local side (X) axis.
        height: Extent along the local up (Y) axis.
        space: Local frame; the panel normal is space.forward.
        seen_from: Which face blocks; panels default to BOTH.
    """
    width: float = 1.0
    height: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rectangle extents must be non-negative, got ({self.width}, {self.height})")

    def xy_point_inside_shape(self, point: np.ndarray, radius: float) -> bool:
        """
        Whether the point lies within the half-extents grown by radius.

        Growing by the vehicle radius lets a vehicle whose center would
        pass just beyond an edge still register the hit.
        """
        w = radius + (self.width * 0.5)
        h = radius + (self.height * 0.5)
        ix, iy = point[0], point[1]
        return not (ix > w or ix < -w or iy > h or iy < -h)
