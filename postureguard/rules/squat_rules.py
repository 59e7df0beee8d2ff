from typing import List, Optional

from postureguard.models.analysis_model import Alert, Severity
from postureguard.models.mode_model import AnalysisMode
from postureguard.rules.rule_set import RuleSet
from postureguard.utils.landmarks import LandmarkFrame
from postureguard.utils.logger import debug
from postureguard.utils.posture_signals import (
    KNEE_TOE_MARGIN,
    calculate_back_angle,
    is_knee_over_toe,
)


class SquatRules(RuleSet):
    """
    Squat form

    1) knee_over_toe  → bad
    2) back_angle     → warning (shoulder-hip-knee angle, left side)
    """

    MODE = AnalysisMode.SQUAT

    KNEE_TOE_MARGIN = KNEE_TOE_MARGIN
    BACK_ANGLE_MIN = 150.0   # degrees

    def __init__(self, knee_toe_margin: Optional[float] = None, back_angle_min: Optional[float] = None):
        self.knee_toe_margin = self.KNEE_TOE_MARGIN if knee_toe_margin is None else knee_toe_margin
        self.back_angle_min = self.BACK_ANGLE_MIN if back_angle_min is None else back_angle_min

    def check(self, frame: LandmarkFrame) -> List[Alert]:
        alerts = []

        knee_over_toe = is_knee_over_toe(frame, margin=self.knee_toe_margin)
        if knee_over_toe:
            alerts.append(Alert(
                type=Severity.BAD,
                message="Knee extending too far forward over toes",
                rule="knee_over_toe",
            ))

        back_angle = calculate_back_angle(frame)
        if back_angle < self.back_angle_min:
            alerts.append(Alert(
                type=Severity.WARNING,
                message=(
                    f"Back angle too low: {back_angle:.1f}° "
                    f"(should be >{self.back_angle_min:g}°)"
                ),
                rule="back_angle",
            ))

        debug(
            f"[SQUAT] knee_over_toe={knee_over_toe} "
            f"back_angle={back_angle:.2f}"
        )
        return alerts
