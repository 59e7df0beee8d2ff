# postureguard/pipeline/classifier.py
"""
PostureGuard — Posture Classifier

One landmark frame + one analysis mode → PostureAnalysis.

Pure and stateless: nothing is retained between calls, so the same
frame and mode always produce an identical result.
"""

from postureguard.models.analysis_model import PostureAnalysis
from postureguard.rules.confidence import calculate_confidence
from postureguard.rules.registry import rule_set_for
from postureguard.utils.landmarks import LandmarkFrame


def analyze_posture(landmarks, mode) -> PostureAnalysis:
    """
    Raises:
        UnsupportedMode: mode is not squat / desk_sitting
        InvalidFrame: frame is not 33 valid slots, or a required joint is absent
    """
    rules = rule_set_for(mode)
    frame = LandmarkFrame.from_sequence(landmarks)

    alerts, overall = rules.evaluate(frame)

    return PostureAnalysis(
        alerts=alerts,
        overall_status=overall,
        confidence=calculate_confidence(frame),
    )
