# MIT License (see LICENSE)
"""
Box obstacle built from six rectangular faces.

A box has no geometry test of its own. Each query builds its six faces as
RectangleObstacles, oriented so that every face's local +Z points away
from the box center, and picks the nearest face hit.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from ..local_space import LocalSpace
from .base import Obstacle, first_path_intersection_with_obstacle_group
from .intersection import PathIntersection
from .plane import RectangleObstacle

if TYPE_CHECKING:
    from ..vehicle import AbstractVehicle


@dataclass(eq=False)
class BoxObstacle(Obstacle):
    """
    Oriented box centered on space.position.

    Attributes:
        width: Extent along the local side axis.
        height: Extent along the local up axis.
        depth: Extent along the local forward axis.
        space: Local frame of the box.
        seen_from: OUTSIDE (solid, default), INSIDE (hollow) or BOTH.
                   Applied to every face.
    """
    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0
    space: LocalSpace = field(default_factory=LocalSpace)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError(
                f"Box extents must be non-negative, got ({self.width}, {self.height}, {self.depth})"
            )

    def faces(self) -> tuple[RectangleObstacle, ...]:
        """
        The six faces, in order: front, back, side, other side, top, bottom.

        Faces are new objects on every call and are not kept by the box.
        """
        w, h, d = self.width, self.height, self.depth
        s, u, f = self.space.side, self.space.up, self.space.forward
        p = self.space.position
        hw = s * (0.5 * w)
        hh = u * (0.5 * h)
        hd = f * (0.5 * d)
        sf = self.seen_from

        def face(fw: float, fh: float, fs: np.ndarray, fu: np.ndarray, ff: np.ndarray,
                 fp: np.ndarray) -> RectangleObstacle:
            return RectangleObstacle(space=LocalSpace(fs, fu, ff, fp), width=fw, height=fh,
                                     seen_from=sf)

        return (
            face(w, h, s, u, f, p + hd),     # front
            face(w, h, -s, u, -f, p - hd),   # back
            face(d, h, -f, u, s, p + hw),    # side
            face(d, h, f, u, -s, p - hw),    # other side
            face(w, d, s, -f, u, p + hh),    # top
            face(w, d, -s, -f, -u, p - hh),  # bottom
        )

    def find_intersection_with_vehicle_path(self, vehicle: AbstractVehicle) -> PathIntersection:
        """
        Nearest hit among the box's faces.

        The returned intersection refers to the box itself rather than to
        the transient face that was hit.
        """
        pi, _ = first_path_intersection_with_obstacle_group(vehicle, self.faces())
        if pi.intersect:
            pi.obstacle = self
        return pi
