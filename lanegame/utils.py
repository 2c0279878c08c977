"""Small vector helpers shared by entities and scenes."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple


def normalize(x: float, y: float) -> Optional[Tuple[float, float]]:
    """Return the unit vector pointing along (x, y), or None for a zero vector."""
    magnitude = math.sqrt(x * x + y * y)
    if magnitude == 0:
        return None
    return x / magnitude, y / magnitude


def get_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance between two points, measured on whole-number coordinates.

    Coordinates are truncated toward zero before the distance is taken.
    """
    dx = int(x2) - int(x1)
    dy = int(y2) - int(y1)
    return math.sqrt(dx * dx + dy * dy)


def get_angle_degree(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Signed angle in degrees that turns v1 onto v2."""
    dot = v1[0] * v2[0] + v1[1] * v2[1]
    det = v1[0] * v2[1] - v1[1] * v2[0]
    return math.degrees(math.atan2(det, dot))