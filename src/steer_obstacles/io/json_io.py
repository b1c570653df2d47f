# MIT License (see LICENSE)
"""
JSON serialization and deserialization for obstacle sets.

An obstacle file describes the static obstacles of a scene together with
the avoidance look-ahead time to use against them.

JSON Schema Overview:
---------------------
{
  "min_time_to_collision": float,      # Seconds, default: 2.0
  "obstacles": [
    {
      "type": "sphere",
      "center": [x, y, z],             # Default: [0, 0, 0]
      "radius": float,                 # Required, >= 0
      "seen_from": "outside"           # "outside" | "inside" | "both"
    },
    {
      "type": "plane",
      "side": [x, y, z],               # Optional, derived when omitted
      "up": [x, y, z],                 # Optional, default: [0, 1, 0]
      "forward": [x, y, z],            # Plane normal, default: [0, 0, 1]
      "position": [x, y, z],
      "seen_from": "both"
    },
    {
      "type": "rectangle",
      "width": float, "height": float, # Required, >= 0
      ...frame fields as for "plane"
    },
    {
      "type": "box",
      "width": float, "height": float, "depth": float,   # Required, >= 0
      ...frame fields as for "plane"
    }
  ]
}

When "seen_from" is omitted the obstacle type's default applies
(spheres and boxes: "outside"; planes and rectangles: "both").

Frame axes may be partial. Missing axes are derived right handed
(side = forward × up). If side, up and forward are all given they must
be orthonormal, otherwise ValueError is raised.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Iterable

import numpy as np

from ..config import AvoidanceConfig
from ..constants import UP, FORWARD, DEFAULT_MIN_TIME_TO_COLLISION
from ..local_space import LocalSpace
from ..util import cross
from ..obstacles import (
    Obstacle,
    SeenFrom,
    SphericalObstacle,
    PlaneObstacle,
    RectangleObstacle,
    BoxObstacle,
)

logger = logging.getLogger(__name__)


def load_obstacles_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from an obstacle file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_obstacles(path: str) -> tuple[AvoidanceConfig, list[Obstacle]]:
    """
    Load an obstacle file into a config and a list of obstacles.

    Args:
        path: Path to the JSON obstacle file.

    Returns:
        Tuple (config, obstacles) with obstacles in file order.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If an obstacle definition is missing or has invalid fields.
    """
    data = load_obstacles_raw(path)
    config = AvoidanceConfig(
        min_time_to_collision=float(data.get("min_time_to_collision",
                                             DEFAULT_MIN_TIME_TO_COLLISION)),
    )
    obstacles = [obstacle_from_json(d) for d in data.get("obstacles", [])]
    logger.info("Loaded %d obstacles from %s", len(obstacles), path)
    return config, obstacles


def obstacle_from_json(d: dict[str, Any]) -> Obstacle:
    """
    Parse a single obstacle definition from a dictionary.

    Args:
        d: Dictionary with a "type" field and the type's properties.

    Returns:
        The constructed obstacle.
    """
    if "type" not in d:
        raise ValueError("Obstacle definition missing required 'type' field.")
    obstacle_type = d["type"]

    kwargs: dict[str, Any] = {}
    if "seen_from" in d:
        kwargs["seen_from"] = _parse_seen_from(d["seen_from"])

    if obstacle_type == "sphere":
        radius = _required_extent(d, "radius")
        return SphericalObstacle(center=_vec3(d.get("center", [0.0, 0.0, 0.0]), "center"),
                                 radius=radius, **kwargs)
    if obstacle_type == "plane":
        return PlaneObstacle(space=_space_from_json(d), **kwargs)
    if obstacle_type == "rectangle":
        return RectangleObstacle(
            space=_space_from_json(d),
            width=_required_extent(d, "width"),
            height=_required_extent(d, "height"),
            **kwargs,
        )
    if obstacle_type == "box":
        return BoxObstacle(
            width=_required_extent(d, "width"),
            height=_required_extent(d, "height"),
            depth=_required_extent(d, "depth"),
            space=_space_from_json(d),
            **kwargs,
        )
    raise ValueError(f"Unknown obstacle type: '{obstacle_type}'")


def obstacle_to_json(obstacle: Obstacle) -> dict[str, Any]:
    """
    Serialize an obstacle to a dictionary (round-trip compatible).

    seen_from is always written so the result does not depend on
    per-type defaults.
    """
    # RectangleObstacle is a PlaneObstacle: test the subclass first
    if isinstance(obstacle, SphericalObstacle):
        result = {
            "type": "sphere",
            "center": _to_list(obstacle.center),
            "radius": obstacle.radius,
        }
    elif isinstance(obstacle, RectangleObstacle):
        result = {"type": "rectangle", "width": obstacle.width, "height": obstacle.height}
        result.update(_space_to_json(obstacle.space))
    elif isinstance(obstacle, PlaneObstacle):
        result = {"type": "plane"}
        result.update(_space_to_json(obstacle.space))
    elif isinstance(obstacle, BoxObstacle):
        result = {
            "type": "box",
            "width": obstacle.width,
            "height": obstacle.height,
            "depth": obstacle.depth,
        }
        result.update(_space_to_json(obstacle.space))
    else:
        raise TypeError(f"Cannot serialize unknown obstacle type: {type(obstacle)}")

    result["seen_from"] = obstacle.seen_from.value
    return result


def obstacles_to_json(
    obstacles: Iterable[Obstacle],
    config: AvoidanceConfig | None = None,
) -> dict[str, Any]:
    """Serialize obstacles (and optionally their config) to a file-level dict."""
    result: dict[str, Any] = {}
    if config is not None:
        result["min_time_to_collision"] = config.min_time_to_collision
    result["obstacles"] = [obstacle_to_json(o) for o in obstacles]
    return result


def save_obstacles(
    obstacles: Iterable[Obstacle],
    path: str,
    config: AvoidanceConfig | None = None,
    indent: int = 2,
) -> None:
    """Save obstacles to a JSON file on disk."""
    data = obstacles_to_json(obstacles, config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved %d obstacles to %s", len(data["obstacles"]), path)


def _parse_seen_from(value: Any) -> SeenFrom:
    try:
        return SeenFrom(value)
    except ValueError:
        raise ValueError(f"Unknown seen_from value: {value!r}") from None


def _required_extent(d: dict[str, Any], key: str) -> float:
    if key not in d:
        raise ValueError(f"Obstacle of type '{d['type']}' missing required '{key}' field.")
    try:
        value = float(d[key])
    except (TypeError, ValueError):
        raise ValueError(f"Obstacle '{key}' must be a number, got {d[key]!r}") from None
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"Obstacle '{key}' must be a non-negative finite number, got {value}")
    return value


def _vec3(value: Any, key: str) -> np.ndarray:
    try:
        v = np.array(value, dtype=np.float64)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a 3-vector, got {value!r}") from None
    if v.shape != (3,) or not np.all(np.isfinite(v)):
        raise ValueError(f"'{key}' must be a 3-vector, got {value!r}")
    return v


def _space_from_json(d: dict[str, Any]) -> LocalSpace:
    """
    Build an obstacle frame from its JSON fields.

    Omitted axes are derived from the given ones: with only "forward",
    the canonical up completes the frame; with "forward" and "side",
    up = side × forward. When all three axes are given they must be
    orthonormal.
    """
    position = _vec3(d.get("position", [0.0, 0.0, 0.0]), "position")
    forward = _vec3(d.get("forward", FORWARD.tolist()), "forward")

    if "side" in d and "up" in d:
        space = LocalSpace(
            side=_vec3(d["side"], "side"),
            up=_vec3(d["up"], "up"),
            forward=forward,
            position=position,
        )
        basis = np.stack([space.side, space.up, space.forward])
        if not np.allclose(basis @ basis.T, np.eye(3), atol=1e-6):
            raise ValueError(
                f"Frame axes must be orthonormal, got side={d['side']!r}, "
                f"up={d['up']!r}, forward={d.get('forward')!r}"
            )
        return space

    if "up" in d:
        up = _vec3(d["up"], "up")
    elif "side" in d:
        up = cross(_vec3(d["side"], "side"), forward)
    else:
        up = UP
    # from_forward raises ValueError on a zero or up-parallel forward
    return LocalSpace.from_forward(forward, up, position)


def _space_to_json(space: LocalSpace) -> dict[str, list[float]]:
    return {
        "side": _to_list(space.side),
        "up": _to_list(space.up),
        "forward": _to_list(space.forward),
        "position": _to_list(space.position),
    }


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
