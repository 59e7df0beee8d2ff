from pydantic import BaseModel, Field
from typing import Any, List, Optional


class AnalyzeRequest(BaseModel):
    mode: str
    # Raw tracker output, validated by LandmarkFrame so a bad slot
    # surfaces as InvalidFrame instead of a schema error
    landmarks: List[Any]


class FrameInput(BaseModel):
    frame_index: Optional[int] = None
    landmarks: List[Any] = Field(default_factory=list)


class BatchRequest(BaseModel):
    mode: str
    frames: List[FrameInput] = Field(default_factory=list)
