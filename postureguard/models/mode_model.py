from enum import Enum

from postureguard.utils.errors import UnsupportedMode


class AnalysisMode(str, Enum):
    """Closed selector of the rule set applied to a frame."""

    SQUAT = "squat"
    DESK_SITTING = "desk_sitting"

    @classmethod
    def parse(cls, value) -> "AnalysisMode":
        """
        Accepts enum members and their string values.
        "desk-sitting" is treated as a spelling of "desk_sitting".
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedMode(f"Unsupported analysis mode: {value!r}") from None
