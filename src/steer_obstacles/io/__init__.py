# MIT License (see LICENSE)
"""
Input/Output utilities for obstacle sets.

This subpackage provides:
    - JSON serialization: Save and load obstacle files.
    - Round-trip support: Serialized obstacles load back identically.

Typical usage:
    from steer_obstacles.io import load_obstacles, save_obstacles

    config, obstacles = load_obstacles("course.json")
    save_obstacles(obstacles, "output.json", config=config)
"""
from .json_io import (
    load_obstacles,
    load_obstacles_raw,
    save_obstacles,
    obstacles_to_json,
    obstacle_to_json,
    obstacle_from_json,
)

__all__ = [
    # Loading
    "load_obstacles",
    "load_obstacles_raw",
    # Saving
    "save_obstacles",
    # Serialization
    "obstacles_to_json",
    "obstacle_to_json",
    "obstacle_from_json",
]
