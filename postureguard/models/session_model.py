from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from postureguard.models.analysis_model import PostureAnalysis, Severity
from postureguard.models.input_model import FrameInput
from postureguard.models.mode_model import AnalysisMode


class SessionInput(BaseModel):
    mode: AnalysisMode


class FrameResult(BaseModel):
    frame_index: int
    analysis: Optional[PostureAnalysis] = None
    error: Optional[str] = None


class SessionSummary(BaseModel):
    frames_analyzed: int = 0
    frames_failed: int = 0
    status_counts: Dict[str, int] = Field(default_factory=dict)
    worst_status: Severity = Severity.GOOD
    mean_confidence: float = 0.0


class CuesModel(BaseModel):
    tips: List[str] = Field(default_factory=list)


class SessionContext(BaseModel):
    """
    Context passed through the batch pipeline stages.
    Raw frames are input only and never serialized back.
    """

    input: SessionInput
    frames: List[FrameInput] = Field(default_factory=list, exclude=True)

    results: List[FrameResult] = Field(default_factory=list)
    summary: SessionSummary = Field(default_factory=SessionSummary)
    cues: CuesModel = Field(default_factory=CuesModel)
