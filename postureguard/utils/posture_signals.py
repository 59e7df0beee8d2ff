# postureguard/utils/posture_signals.py
"""
Geometric signals consumed by the rule sets.

Pure functions over a LandmarkFrame. Only the left side is sampled for
the back and neck angles; no bilateral averaging.
"""

from postureguard.utils.angles import calculate_angle, vertical_deviation
from postureguard.utils.landmarks import LandmarkFrame, PoseLandmark as P


KNEE_TOE_MARGIN = 0.05        # normalized frame units
SPINE_DEVIATION_MAX = 20.0    # degrees


def is_knee_over_toe(frame: LandmarkFrame, margin: float = KNEE_TOE_MARGIN) -> bool:
    """True if either knee is ahead of its ankle by more than `margin` in x."""
    left = frame.landmark(P.LEFT_KNEE).x > frame.landmark(P.LEFT_ANKLE).x + margin
    right = frame.landmark(P.RIGHT_KNEE).x > frame.landmark(P.RIGHT_ANKLE).x + margin
    return left or right


def calculate_back_angle(frame: LandmarkFrame) -> float:
    return calculate_angle(
        frame.landmark(P.LEFT_SHOULDER),
        frame.landmark(P.LEFT_HIP),
        frame.landmark(P.LEFT_KNEE),
    )


def calculate_neck_angle(frame: LandmarkFrame) -> float:
    return calculate_angle(
        frame.landmark(P.NOSE),
        frame.landmark(P.LEFT_SHOULDER),
        frame.landmark(P.LEFT_HIP),
    )


def spine_deviation(frame: LandmarkFrame) -> float:
    """Deviation (degrees) of the shoulder-center → hip-center vector from vertical."""
    return vertical_deviation(frame.shoulder_center(), frame.hip_center())


def is_back_straight(frame: LandmarkFrame, max_deviation: float = SPINE_DEVIATION_MAX) -> bool:
    return spine_deviation(frame) < max_deviation
