from typing import Iterable, List

from postureguard.models.analysis_model import Alert, Severity


OVERALL_RULE = "overall"
OVERALL_MESSAGE = "Great posture! Keep it up!"


def worst_severity(severities: Iterable[Severity]) -> Severity:
    """
    Fold severities under good < warning < bad.
    Empty input => good.
    """
    return max(severities, key=lambda s: s.rank, default=Severity.GOOD)


def overall_severity(alerts: Iterable[Alert]) -> Severity:
    return worst_severity(a.type for a in alerts)


def ensure_alerts(alerts: List[Alert]) -> List[Alert]:
    """Append the synthetic good alert when no rule fired."""
    if alerts:
        return alerts
    return [Alert(type=Severity.GOOD, message=OVERALL_MESSAGE, rule=OVERALL_RULE)]
