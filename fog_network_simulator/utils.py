"""
Utility functions for random draws and distance computation.
"""

import math
import numpy as np
from typing import Tuple, Sequence, Optional
from scipy.spatial.distance import cdist


RGB = Tuple[int, int, int]

# Channels stay below this to keep colors readably dark
MAX_COLOR_CHANNEL = 200


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Construct a PCG64-based Generator. If seed is None, uses entropy."""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(np.random.PCG64(seed))


def euclidean_distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    """
    Calculate Euclidean distance between two points.

    Args:
        p1: First point (x, y)
        p2: Second point (x, y)

    Returns:
        Distance in plane units
    """
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


def pairwise_distances(positions: Sequence[Tuple[float, float]]) -> np.ndarray:
    """
    Compute the all-pairs Euclidean distance matrix.

    Args:
        positions: Node positions in id order

    Returns:
        (n, n) array where entry [i, j] is the distance from node i to node j
    """
    if len(positions) == 0:
        return np.zeros((0, 0))

    points = np.asarray(positions, dtype=float)
    return cdist(points, points, metric="euclidean")


def random_color(rng: np.random.Generator) -> RGB:
    """
    Draw a random dark-toned RGB color.

    Args:
        rng: Random source

    Returns:
        (r, g, b) tuple, each channel in [0, 200)
    """
    r, g, b = rng.integers(0, MAX_COLOR_CHANNEL, size=3)
    return int(r), int(g), int(b)


def to_css_rgb(color: RGB) -> str:
    """Format an RGB tuple as a CSS color string."""
    return f"rgb({color[0]}, {color[1]}, {color[2]})"


def to_mpl_color(color: RGB) -> Tuple[float, float, float]:
    """Convert an 8-bit RGB tuple to matplotlib's [0, 1] floats."""
    return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0
