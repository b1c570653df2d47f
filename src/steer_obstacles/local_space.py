# MIT License (see LICENSE)
"""
Local coordinate frames.

A LocalSpace is an orthonormal basis (side, up, forward) plus an origin
(position). Obstacles with orientation and vehicles both use one to move
points and directions between world space and their own space, where
intersection arithmetic becomes one-dimensional along the local Z axis.

Conventions:
  - Right handed: side = forward × up.
  - Default frame: side = -X, up = +Y, forward = +Z, position = origin.
  - Localized vectors are expressed as (x, y, z) = (side, up, forward)
    components.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import SIDE, UP, FORWARD
from .util import f64, dot, norm, cross, unit


@dataclass
class LocalSpace:
    """
    Orthonormal local frame.

    Attributes:
        side: Unit local X axis in world space.
        up: Unit local Y axis in world space.
        forward: Unit local Z axis in world space.
        position: Origin of the frame in world space.

    Note:
        Axes are not re-orthonormalized on assignment; callers that build
        a frame by hand must supply orthonormal axes. Use from_forward()
        to derive a frame from a heading.
    """
    side: np.ndarray = field(default_factory=lambda: SIDE.copy())
    up: np.ndarray = field(default_factory=lambda: UP.copy())
    forward: np.ndarray = field(default_factory=lambda: FORWARD.copy())
    position: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))

    def __post_init__(self) -> None:
        """Convert axes and origin to float64 arrays."""
        self.side = f64(self.side)
        self.up = f64(self.up)
        self.forward = f64(self.forward)
        self.position = f64(self.position)

    @classmethod
    def from_forward(
        cls,
        forward: np.ndarray | tuple[float, float, float],
        up: np.ndarray | tuple[float, float, float] = (0.0, 1.0, 0.0),
        position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> "LocalSpace":
        """Build an orthonormal frame facing `forward`, using `up` as a hint."""
        space = cls(position=position)
        space.regenerate_orthonormal_basis(forward, up)
        return space

    def regenerate_orthonormal_basis(
        self,
        new_forward: np.ndarray | tuple[float, float, float],
        up: np.ndarray | tuple[float, float, float] | None = None,
    ) -> None:
        """
        Re-derive side and up from a new forward direction.

        side = forward × up, then up = side × forward, so the result is
        orthonormal even if `up` is only approximately perpendicular.

        Raises:
            ValueError: If forward has zero length or is parallel to up.
        """
        f = f64(new_forward)
        if norm(f) == 0.0:
            raise ValueError("Forward direction must be non-zero")
        f = unit(f)
        u = self.up if up is None else f64(up)
        s = cross(f, u)
        if norm(s) < 1e-9:
            raise ValueError(f"Forward {f.tolist()} is parallel to up {u.tolist()}")
        s = unit(s)
        self.forward = f
        self.side = s
        self.up = cross(s, f)

    def localize_direction(self, global_direction: np.ndarray) -> np.ndarray:
        """Express a world-space direction in this frame (no translation)."""
        d = global_direction
        return np.array([dot(d, self.side), dot(d, self.up), dot(d, self.forward)],
                        dtype=np.float64)

    def localize_position(self, global_position: np.ndarray) -> np.ndarray:
        """Express a world-space point in this frame."""
        return self.localize_direction(f64(global_position) - self.position)

    def globalize_direction(self, local_direction: np.ndarray) -> np.ndarray:
        """Map a local direction back to world space."""
        x, y, z = local_direction[0], local_direction[1], local_direction[2]
        return self.side * x + self.up * y + self.forward * z

    def globalize_position(self, local_position: np.ndarray) -> np.ndarray:
        """Map a local point back to world space."""
        return self.position + self.globalize_direction(local_position)
