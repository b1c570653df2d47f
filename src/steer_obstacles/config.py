# MIT License (see LICENSE)
"""
Avoidance configuration.

AvoidanceConfig gathers the tunables used when steering around obstacles.
Values come from keyword arguments, from environment variables
(AvoidanceConfig.from_env) or from an obstacle file (see io.json_io).

Environment variables:
    STEER_OBSTACLES_MIN_TIME: look-ahead time in seconds.
"""
from __future__ import annotations
from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Iterable, Mapping

import numpy as np

from .constants import DEFAULT_MIN_TIME_TO_COLLISION

if TYPE_CHECKING:
    from .obstacles import Obstacle
    from .vehicle import AbstractVehicle

ENV_MIN_TIME = "STEER_OBSTACLES_MIN_TIME"


@dataclass(frozen=True)
class AvoidanceConfig:
    """
    Tunables for obstacle avoidance.

    Attributes:
        min_time_to_collision: Obstacles hit sooner than this many seconds
                               ahead (at current speed) trigger steering.
    """
    min_time_to_collision: float = DEFAULT_MIN_TIME_TO_COLLISION

    def __post_init__(self) -> None:
        """Validate ranges."""
        t = self.min_time_to_collision
        if not np.isfinite(t) or t < 0:
            raise ValueError(f"min_time_to_collision must be a non-negative number, got {t}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AvoidanceConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of os.environ.

        Raises:
            ValueError: If a variable is set but is not a valid value.
        """
        env = os.environ if environ is None else environ
        raw = env.get(ENV_MIN_TIME, "").strip()
        if not raw:
            return cls()
        try:
            t = float(raw)
        except ValueError:
            raise ValueError(f"{ENV_MIN_TIME} must be a number, got {raw!r}") from None
        return cls(min_time_to_collision=t)

    def steer_to_avoid_obstacles(
        self,
        vehicle: AbstractVehicle,
        obstacles: Iterable[Obstacle],
    ) -> np.ndarray:
        """Avoidance force for a group using this config's look-ahead time."""
        from .obstacles import steer_to_avoid_obstacles
        return steer_to_avoid_obstacles(vehicle, self.min_time_to_collision, obstacles)
