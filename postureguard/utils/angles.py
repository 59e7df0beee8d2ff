# postureguard/utils/angles.py

from math import atan2, degrees

import numpy as np


def _xy(p):
    return np.array([p.x, p.y], dtype=float)


# -----------------------------------------------------------
# ANGLE AT A VERTEX
# -----------------------------------------------------------

def calculate_angle(a, b, c) -> float:
    """
    Angle ABC in degrees using vectors BA and BC.

    Planar only: z is ignored. Result is in [0, 180].
    A zero-length vector (coincident points) yields 0.0.
    """
    ba = _xy(a) - _xy(b)
    bc = _xy(c) - _xy(b)

    mag1 = float(np.linalg.norm(ba))
    mag2 = float(np.linalg.norm(bc))
    if mag1 == 0.0 or mag2 == 0.0:
        return 0.0

    cos_angle = float(np.dot(ba, bc) / (mag1 * mag2))
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return float(np.degrees(np.arccos(cos_angle)))


# -----------------------------------------------------------
# DEVIATION FROM VERTICAL
# -----------------------------------------------------------

def vertical_deviation(top, bottom) -> float:
    """
    Absolute angle (degrees) between the top→bottom vector and the
    image vertical. 0 when bottom is straight below top.
    """
    dx = bottom.x - top.x
    dy = bottom.y - top.y
    return abs(degrees(atan2(dx, dy)))
