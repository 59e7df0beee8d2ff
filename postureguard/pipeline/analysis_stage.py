# postureguard/pipeline/analysis_stage.py
"""
PostureGuard — Analysis Stage

Each frame is analyzed independently. A malformed frame is recorded
on its own result and does not stop the remaining frames.
"""

from postureguard.models.session_model import FrameResult, SessionContext
from postureguard.pipeline.classifier import analyze_posture
from postureguard.utils.errors import InvalidFrame
from postureguard.utils.logger import log, warn


def run(ctx: SessionContext) -> SessionContext:
    mode = ctx.input.mode
    log(f"[INFO] AnalysisStage: {len(ctx.frames)} frame(s), mode={mode.value}")

    results = []

    for idx, frame in enumerate(ctx.frames):
        frame_index = frame.frame_index if frame.frame_index is not None else idx

        try:
            analysis = analyze_posture(frame.landmarks, mode)
        except InvalidFrame as e:
            warn(f"[AnalysisStage] frame {frame_index} skipped: {e}")
            results.append(FrameResult(frame_index=frame_index, error=str(e)))
            continue

        results.append(FrameResult(frame_index=frame_index, analysis=analysis))

    ctx.results = results
    return ctx
