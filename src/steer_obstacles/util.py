# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

All functions operate on vectors represented as float64 numpy arrays of
shape (3,). Tuples and lists are accepted wherever an array is expected.
"""
from __future__ import annotations

import numpy as np

from .constants import DEFAULT_EPS


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase so obstacle and vehicle fields accept
    tuples as well as arrays.
    """
    return np.array(x, dtype=np.float64)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Scalar product as a Python float."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt."""
    return dot(v, v)


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = DEFAULT_EPS) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(3, dtype=np.float64)
    return v / n


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """3D cross product a × b."""
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ], dtype=np.float64)


def parallel_component(v: np.ndarray, unit_basis: np.ndarray) -> np.ndarray:
    """Component of v parallel to unit_basis (which must have unit length)."""
    return unit_basis * dot(v, unit_basis)


def perpendicular_component(v: np.ndarray, unit_basis: np.ndarray) -> np.ndarray:
    """
    Component of v perpendicular to unit_basis.

    Used to extract the lateral part of a steering hint relative to a
    vehicle's forward direction.
    """
    return v - parallel_component(v, unit_basis)
