# postureguard/pipeline/cues_stage.py

from postureguard.cues.cue_engine import build_tips
from postureguard.models.session_model import SessionContext


def run(ctx: SessionContext) -> SessionContext:
    """Improvement tips for the worst status seen in the session."""
    ctx.cues.tips = build_tips(ctx.summary.worst_status)
    return ctx
