from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Alert / overall tier. Total order: good < warning < bad."""

    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.GOOD: 0,
    Severity.WARNING: 1,
    Severity.BAD: 2,
}


class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Severity
    message: str
    rule: str


class PostureAnalysis(BaseModel):
    """
    Result of analyzing a single landmark frame.

    - alerts: rule-evaluation order, never empty
    - overall_status: worst alert severity (serialized as "overallStatus")
    - confidence: key-joint visibility percentage
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    alerts: List[Alert] = Field(min_length=1)
    overall_status: Severity = Field(alias="overallStatus")
    confidence: int = Field(ge=0, le=100)
