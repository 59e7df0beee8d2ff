from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml

from postureguard.models.analysis_model import Severity
from postureguard.models.mode_model import AnalysisMode

CUES_PATH = Path(__file__).parent / "cues.yaml"


@lru_cache(maxsize=1)
def load_cues() -> Dict[str, Any]:
    with open(CUES_PATH, "r") as f:
        return yaml.safe_load(f)


def build_tips(status) -> List[str]:
    """Improvement tips for an overall status. Empty for good posture."""
    status = Severity(status)
    return list(load_cues()["tips"].get(status.value) or [])


def mode_instructions(mode) -> Dict[str, Any]:
    mode = AnalysisMode.parse(mode)
    entry = load_cues()["modes"][mode.value]
    return {
        "title": entry["title"],
        "instructions": list(entry["instructions"]),
    }
