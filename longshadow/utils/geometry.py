"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def distances_from(points: NDArray[np.float64], origin: tuple[float, float]) -> NDArray[np.float64]:
    """Euclidean distance of each point to origin."""
    if len(points) == 0:
        return np.empty(0)
    return np.hypot(points[:, 0] - origin[0], points[:, 1] - origin[1])


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round half up to `decimals` places, e.g. 0.125 -> 0.13."""
    factor = 10**decimals
    return float(np.floor(value * factor + 0.5) / factor)
