from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional


class Landmark(BaseModel):
    """
    One tracked body-joint sample from the upstream pose model.

    - x, y: normalized [0,1] frame coordinates (y grows downwards)
    - z: depth estimate (ignored by every angle computation)
    - visibility: [0,1], None when the tracker did not report one

    The upstream short name "vis" is accepted as an input alias.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        validation_alias=AliasChoices("visibility", "vis"),
    )
