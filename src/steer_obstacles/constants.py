# MIT License (see LICENSE)
"""
Canonical vectors and numeric tolerances.

The axis constants describe the default right-handed local space:
side = -X, up = +Y, forward = +Z. They are read-only arrays; use
zero3() or .copy() when a writable vector is needed.
"""
from __future__ import annotations

import numpy as np


def _frozen(x) -> np.ndarray:
    a = np.array(x, dtype=np.float64)
    a.flags.writeable = False
    return a


ZERO: np.ndarray = _frozen((0.0, 0.0, 0.0))
SIDE: np.ndarray = _frozen((-1.0, 0.0, 0.0))
UP: np.ndarray = _frozen((0.0, 1.0, 0.0))
FORWARD: np.ndarray = _frozen((0.0, 0.0, 1.0))

# Below this length a vector is treated as having no direction.
DEFAULT_EPS: float = 1e-12

# Default look-ahead used when no configuration is supplied (seconds).
DEFAULT_MIN_TIME_TO_COLLISION: float = 2.0


def zero3() -> np.ndarray:
    """Fresh, writable zero vector."""
    return np.zeros(3, dtype=np.float64)
