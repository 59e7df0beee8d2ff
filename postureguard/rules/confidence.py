import math

from postureguard.utils.landmarks import LandmarkFrame, PoseLandmark as P


KEY_JOINTS = (
    P.LEFT_SHOULDER,
    P.RIGHT_SHOULDER,
    P.LEFT_HIP,
    P.RIGHT_HIP,
    P.LEFT_KNEE,
    P.RIGHT_KNEE,
)


def calculate_confidence(frame: LandmarkFrame) -> int:
    """
    Returns confidence ∈ [0,100]
    - mean visibility of the six key joints
    - absent joint / missing visibility counts as 0
    - rounded half-up
    """
    visibilities = [frame.visibility(j) for j in KEY_JOINTS]
    avg = sum(visibilities) / len(visibilities)
    return max(0, min(100, int(math.floor(avg * 100 + 0.5))))
