# MIT License (see LICENSE)
"""
Spherical obstacle.

The intersection test is the classic line/sphere quadratic, solved in the
vehicle's local space where the path is the +Z axis through the origin.
The vehicle's own radius is added to the sphere's (Minkowski sum), so the
vehicle can be treated as a point.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from ..constants import zero3
from ..util import f64, unit
from .base import Obstacle, SeenFrom
from .intersection import PathIntersection

if TYPE_CHECKING:
    from ..vehicle import AbstractVehicle


@dataclass(eq=False)
class SphericalObstacle(Obstacle):
    """
    Sphere defined by center and radius.

    Attributes:
        center: World-space center [x, y, z].
        radius: Sphere radius (>= 0).
        seen_from: OUTSIDE (solid, default), INSIDE (hollow) or BOTH.
    """
    center: np.ndarray = field(default_factory=zero3)
    radius: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.center = f64(self.center)
        if self.radius < 0:
            raise ValueError(f"Sphere radius must be non-negative, got {self.radius}")

    def find_intersection_with_vehicle_path(self, vehicle: AbstractVehicle) -> PathIntersection:
        """
        Intersect the vehicle's forward ray with this sphere.

        With lc the sphere center in vehicle space and r the combined
        radius, points on the path z satisfy:
            z² + b·z + c = 0,  b = -2·lc.z,  c = |lc|² - r²
        Roots p >= q are distances along the path to the two crossings.

        Distance policy:
          - both roots ahead: the nearer one.
          - one root ahead (vehicle inside the sphere): 0 for OUTSIDE
            obstacles, otherwise the root ahead (the exit surface).
        """
        pi = PathIntersection()

        lc = vehicle.localize_position(self.center)
        r = self.radius + vehicle.radius()
        b = -2.0 * lc[2]
        c = float(lc[0] * lc[0] + lc[1] * lc[1] + lc[2] * lc[2]) - r * r
        d = b * b - 4.0 * c

        # path misses the sphere
        if d < 0:
            return pi

        # d == 0: tangent, p and q coincide
        s = float(np.sqrt(d))
        p = (-b + s) / 2.0
        q = (-b - s) / 2.0

        # sphere entirely behind the vehicle
        if p <= 0 and q <= 0:
            return pi

        if p > 0 and q > 0:
            distance = min(p, q)
        elif self.seen_from is SeenFrom.OUTSIDE:
            # inside a solid obstacle: already colliding
            distance = 0.0
        else:
            distance = p if p > 0 else q

        pi.intersect = True
        pi.obstacle = self
        pi.distance = float(distance)
        pi.surface_point = vehicle.position() + vehicle.forward() * pi.distance
        pi.surface_normal = unit(pi.surface_point - self.center)
        pi.steer_hint = pi.surface_normal
        return pi
