from fastapi import APIRouter

from postureguard.cues.cue_engine import mode_instructions
from postureguard.models.mode_model import AnalysisMode

router = APIRouter()


@router.get("/modes")
def modes():
    return [
        {"mode": m.value, **mode_instructions(m)}
        for m in AnalysisMode
    ]
