from enum import IntEnum
from typing import Optional, Sequence, Tuple

from pydantic import ValidationError

from postureguard.models.landmark_model import Landmark
from postureguard.utils.errors import InvalidFrame


FRAME_SIZE = 33


class PoseLandmark(IntEnum):
    """
    MediaPipe pose landmark indices.
    Must match the upstream model's output order.
    """

    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


def _coerce(idx: int, item) -> Optional[Landmark]:
    if item is None or isinstance(item, Landmark):
        return item

    try:
        # from_attributes lets MediaPipe NormalizedLandmark objects through
        return Landmark.model_validate(item, from_attributes=True)
    except ValidationError as e:
        name = PoseLandmark(idx).name
        raise InvalidFrame(
            f"Landmark {idx} ({name}) is invalid: {e.error_count()} validation error(s)"
        ) from e


def midpoint(a: Landmark, b: Landmark) -> Landmark:
    """
    Midpoint of two landmarks.
    Visibility is the worse of the two (missing counts as 0).
    """
    try:
        return Landmark(
            x=(a.x + b.x) / 2.0,
            y=(a.y + b.y) / 2.0,
            z=(a.z + b.z) / 2.0,
            visibility=min(a.visibility or 0.0, b.visibility or 0.0),
        )
    except ValidationError as e:
        # coordinates large enough to overflow when summed
        raise InvalidFrame(f"Midpoint is not finite: {e.error_count()} validation error(s)") from e


class LandmarkFrame:
    """
    Fixed-size (33 slot) landmark set for one instant in time.

    Slots may be None (joint not tracked). Reading an absent joint
    through `landmark()` raises InvalidFrame; `visibility()` reports 0.
    """

    __slots__ = ("_landmarks",)

    def __init__(self, landmarks: Sequence[Optional[Landmark]]):
        if len(landmarks) != FRAME_SIZE:
            raise InvalidFrame(
                f"Expected {FRAME_SIZE} landmarks, got {len(landmarks)}"
            )
        self._landmarks: Tuple[Optional[Landmark], ...] = tuple(landmarks)

    @classmethod
    def from_sequence(cls, raw) -> "LandmarkFrame":
        """
        Build a frame from raw tracker output: Landmark objects,
        dicts ({"x","y","z","visibility"|"vis"}) or attribute objects.
        """
        if raw is None:
            raise InvalidFrame("No landmarks provided")
        if isinstance(raw, LandmarkFrame):
            return raw

        try:
            items = list(raw)
        except TypeError:
            raise InvalidFrame(
                f"Landmarks must be a sequence, got {type(raw).__name__}"
            ) from None

        if len(items) != FRAME_SIZE:
            raise InvalidFrame(f"Expected {FRAME_SIZE} landmarks, got {len(items)}")

        return cls([_coerce(i, item) for i, item in enumerate(items)])

    # -----------------------------------------------------
    # Accessors
    # -----------------------------------------------------

    def get(self, joint: PoseLandmark) -> Optional[Landmark]:
        return self._landmarks[int(joint)]

    def landmark(self, joint: PoseLandmark) -> Landmark:
        lm = self._landmarks[int(joint)]
        if lm is None:
            raise InvalidFrame(f"Required joint {PoseLandmark(joint).name} is missing")
        return lm

    def visibility(self, joint: PoseLandmark) -> float:
        lm = self._landmarks[int(joint)]
        if lm is None or lm.visibility is None:
            return 0.0
        return float(lm.visibility)

    # -----------------------------------------------------
    # Shoulders & hips
    # -----------------------------------------------------

    def shoulders_pair(self) -> Tuple[Landmark, Landmark]:
        return (
            self.landmark(PoseLandmark.LEFT_SHOULDER),
            self.landmark(PoseLandmark.RIGHT_SHOULDER),
        )

    def hips_pair(self) -> Tuple[Landmark, Landmark]:
        return (
            self.landmark(PoseLandmark.LEFT_HIP),
            self.landmark(PoseLandmark.RIGHT_HIP),
        )

    def shoulder_center(self) -> Landmark:
        return midpoint(*self.shoulders_pair())

    def hip_center(self) -> Landmark:
        return midpoint(*self.hips_pair())

    def __len__(self) -> int:
        return len(self._landmarks)

