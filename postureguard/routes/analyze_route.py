from fastapi import APIRouter, HTTPException

from postureguard.cues.cue_engine import build_tips
from postureguard.models.input_model import AnalyzeRequest, BatchRequest
from postureguard.models.mode_model import AnalysisMode
from postureguard.models.session_model import SessionContext, SessionInput
from postureguard.pipeline.classifier import analyze_posture
from postureguard.pipeline.analysis_stage import run as analysis_stage
from postureguard.pipeline.summary_stage import run as summary_stage
from postureguard.pipeline.cues_stage import run as cues_stage
from postureguard.utils.errors import InvalidFrame, UnsupportedMode

router = APIRouter()


def _parse_mode(value) -> AnalysisMode:
    try:
        return AnalysisMode.parse(value)
    except UnsupportedMode as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/analyze")
def analyze(req: AnalyzeRequest):
    mode = _parse_mode(req.mode)

    try:
        analysis = analyze_posture(req.landmarks, mode)
    except InvalidFrame as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    payload = analysis.model_dump(mode="json", by_alias=True)
    payload["tips"] = build_tips(analysis.overall_status)
    return payload


@router.post("/analyze/batch")
def analyze_batch(req: BatchRequest):
    mode = _parse_mode(req.mode)

    ctx = SessionContext(input=SessionInput(mode=mode), frames=req.frames)

    ctx = analysis_stage(ctx)
    ctx = summary_stage(ctx)
    ctx = cues_stage(ctx)

    return ctx.model_dump(mode="json", by_alias=True)
