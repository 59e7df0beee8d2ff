from typing import List, Tuple

from postureguard.models.analysis_model import Alert, Severity
from postureguard.models.mode_model import AnalysisMode
from postureguard.rules.aggregator import ensure_alerts, overall_severity
from postureguard.utils.landmarks import LandmarkFrame


class RuleSet:
    """
    Uniform contract for a mode's rules:

        evaluate(frame) -> (alerts, overall tier)

    Subclasses implement `check()` and return alerts in evaluation order.
    """

    MODE: AnalysisMode

    def check(self, frame: LandmarkFrame) -> List[Alert]:
        raise NotImplementedError

    def evaluate(self, frame: LandmarkFrame) -> Tuple[List[Alert], Severity]:
        alerts = ensure_alerts(self.check(frame))
        return alerts, overall_severity(alerts)
