# MIT License (see LICENSE)
"""
Vehicle capability interface consumed by obstacle avoidance.

Obstacle code only reads from a vehicle, so any object exposing the
methods of AbstractVehicle can be passed in: an agent from a larger
steering library, a body from a physics scene, or the SimpleVehicle
value defined here.
"""
from __future__ import annotations
from typing import Protocol, runtime_checkable

import numpy as np

from .local_space import LocalSpace
from .util import f64


@runtime_checkable
class AbstractVehicle(Protocol):
    """Read-only view of a vehicle. Forward is the local +Z axis."""

    def position(self) -> np.ndarray: ...

    def forward(self) -> np.ndarray: ...

    def speed(self) -> float: ...

    def radius(self) -> float: ...

    def max_force(self) -> float: ...

    def localize_position(self, world_point: np.ndarray) -> np.ndarray: ...


class SimpleVehicle:
    """
    Fixed vehicle state implementing AbstractVehicle.

    The local frame is derived once from forward and up, so forward does
    not need to be normalized by the caller. The vectors returned by
    position(), forward(), side() and up() are read-only.

    Example:
        v = SimpleVehicle(position=(0, 0, 0), forward=(0, 0, 1), speed=1.0)
        v.localize_position((0, 0, 10))   # -> [0, 0, 10]
    """

    def __init__(
        self,
        position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0),
        forward: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 1.0),
        up: np.ndarray | tuple[float, float, float] = (0.0, 1.0, 0.0),
        speed: float = 0.0,
        radius: float = 0.0,
        max_force: float = 1.0,
    ) -> None:
        """
        Args:
            position: World position.
            forward: Heading direction (any non-zero length).
            up: Up hint; must not be parallel to forward.
            speed: Scalar speed, >= 0.
            radius: Bounding sphere radius, >= 0.
            max_force: Largest steering force magnitude, >= 0.

        Raises:
            ValueError: On negative scalars or a degenerate heading.
        """
        if speed < 0:
            raise ValueError(f"Vehicle speed must be non-negative, got {speed}")
        if radius < 0:
            raise ValueError(f"Vehicle radius must be non-negative, got {radius}")
        if max_force < 0:
            raise ValueError(f"Vehicle max force must be non-negative, got {max_force}")
        space = LocalSpace.from_forward(forward, up, position)
        # callers get the frame arrays directly; keep them from being mutated
        for axis in (space.side, space.up, space.forward, space.position):
            axis.flags.writeable = False
        self._space = space
        self._speed = float(speed)
        self._radius = float(radius)
        self._max_force = float(max_force)

    def __repr__(self) -> str:
        return (f"SimpleVehicle(position={self.position().tolist()}, "
                f"forward={self.forward().tolist()}, speed={self._speed}, "
                f"radius={self._radius}, max_force={self._max_force})")

    def position(self) -> np.ndarray:
        return self._space.position

    def forward(self) -> np.ndarray:
        return self._space.forward

    def side(self) -> np.ndarray:
        return self._space.side

    def up(self) -> np.ndarray:
        return self._space.up

    def speed(self) -> float:
        return self._speed

    def radius(self) -> float:
        return self._radius

    def max_force(self) -> float:
        return self._max_force

    def localize_position(self, world_point: np.ndarray) -> np.ndarray:
        return self._space.localize_position(f64(world_point))

    def localize_direction(self, world_direction: np.ndarray) -> np.ndarray:
        return self._space.localize_direction(f64(world_direction))
