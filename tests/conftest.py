import math

import pytest

from postureguard.utils.landmarks import FRAME_SIZE, PoseLandmark as P


def build_landmarks(points=None, visibility=1.0, vis=None):
    """
    33 raw landmark dicts, all at (0.5, 0.5) unless overridden.
    points: {PoseLandmark: (x, y)}; vis: {PoseLandmark: visibility}
    """
    lm = [
        {"x": 0.5, "y": 0.5, "z": 0.0, "visibility": visibility}
        for _ in range(FRAME_SIZE)
    ]
    for joint, (x, y) in (points or {}).items():
        lm[int(joint)]["x"] = x
        lm[int(joint)]["y"] = y
    for joint, v in (vis or {}).items():
        lm[int(joint)]["visibility"] = v
    return lm


def upright_torso(lean_deg=0.0):
    """
    Shoulders centered at (0.5, 0.5), hips 0.3 below, hip center shifted
    so that the shoulder→hip vector deviates `lean_deg` from vertical.
    """
    d = 0.3 * math.tan(math.radians(lean_deg))
    return {
        P.LEFT_SHOULDER: (0.55, 0.5),
        P.RIGHT_SHOULDER: (0.45, 0.5),
        P.LEFT_HIP: (0.55 + d, 0.8),
        P.RIGHT_HIP: (0.45 + d, 0.8),
    }


def nose_at_neck_angle(torso, angle_deg):
    """Nose position giving `angle_deg` at the left shoulder (nose, shoulder, hip)."""
    sx, sy = torso[P.LEFT_SHOULDER]
    hx, hy = torso[P.LEFT_HIP]
    theta = math.atan2(hy - sy, hx - sx) + math.radians(angle_deg)
    return (sx + 0.2 * math.cos(theta), sy + 0.2 * math.sin(theta))


@pytest.fixture
def good_squat():
    return build_landmarks({
        P.LEFT_SHOULDER: (0.5, 0.2),
        P.LEFT_HIP: (0.5, 0.5),
        P.LEFT_KNEE: (0.5, 0.8),
        P.RIGHT_KNEE: (0.45, 0.8),
        P.LEFT_ANKLE: (0.5, 0.95),
        P.RIGHT_ANKLE: (0.45, 0.95),
    })


@pytest.fixture
def good_desk():
    torso = upright_torso(0.0)
    points = dict(torso)
    points[P.NOSE] = nose_at_neck_angle(torso, 10.0)
    return build_landmarks(points)
