# postureguard/pipeline/summary_stage.py

import numpy as np

from postureguard.models.analysis_model import Severity
from postureguard.models.session_model import SessionContext, SessionSummary
from postureguard.rules.aggregator import worst_severity


def run(ctx: SessionContext) -> SessionContext:
    """
    Session roll-up over analyzed frames:
    - per-status counts
    - worst status (good when nothing was analyzed)
    - mean confidence
    """
    analyses = [r.analysis for r in ctx.results if r.analysis is not None]

    counts = {s.value: 0 for s in Severity}
    for a in analyses:
        counts[a.overall_status.value] += 1

    mean_conf = 0.0
    if analyses:
        mean_conf = round(float(np.mean([a.confidence for a in analyses])), 2)

    ctx.summary = SessionSummary(
        frames_analyzed=len(analyses),
        frames_failed=len(ctx.results) - len(analyses),
        status_counts=counts,
        worst_status=worst_severity(a.overall_status for a in analyses),
        mean_confidence=mean_conf,
    )
    return ctx
