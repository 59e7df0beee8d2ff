from typing import List, Optional

from postureguard.models.analysis_model import Alert, Severity
from postureguard.models.mode_model import AnalysisMode
from postureguard.rules.rule_set import RuleSet
from postureguard.utils.landmarks import LandmarkFrame
from postureguard.utils.logger import debug
from postureguard.utils.posture_signals import (
    SPINE_DEVIATION_MAX,
    calculate_neck_angle,
    is_back_straight,
    spine_deviation,
)


class DeskSittingRules(RuleSet):
    """
    Desk sitting

    1) neck_angle     → warning (nose-shoulder-hip angle, left side)
    2) back_straight  → bad (shoulder-center → hip-center off vertical)
    """

    MODE = AnalysisMode.DESK_SITTING

    NECK_ANGLE_MAX = 30.0    # degrees
    SPINE_DEVIATION_MAX = SPINE_DEVIATION_MAX

    def __init__(self, neck_angle_max: Optional[float] = None, spine_deviation_max: Optional[float] = None):
        self.neck_angle_max = self.NECK_ANGLE_MAX if neck_angle_max is None else neck_angle_max
        self.spine_deviation_max = (
            self.SPINE_DEVIATION_MAX if spine_deviation_max is None else spine_deviation_max
        )

    def check(self, frame: LandmarkFrame) -> List[Alert]:
        alerts = []

        neck_angle = calculate_neck_angle(frame)
        if neck_angle > self.neck_angle_max:
            alerts.append(Alert(
                type=Severity.WARNING,
                message=(
                    f"Neck bent too much: {neck_angle:.1f}° "
                    f"(should be <{self.neck_angle_max:g}°)"
                ),
                rule="neck_angle",
            ))

        deviation = spine_deviation(frame)
        if not is_back_straight(frame, max_deviation=self.spine_deviation_max):
            alerts.append(Alert(
                type=Severity.BAD,
                message="Back is not straight - improve spinal alignment",
                rule="back_straight",
            ))

        debug(
            f"[DESK] neck_angle={neck_angle:.2f} "
            f"spine_deviation={deviation:.2f}"
        )
        return alerts
