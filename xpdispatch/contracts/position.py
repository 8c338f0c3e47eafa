"""Where the aircraft is placed at the selected airport."""

from pydantic import Field

from xpdispatch.contracts.common import Coordinates
from xpdispatch.contracts.enums import StartPositionType


class StartPosition(Coordinates):
    """A runway threshold, ramp/gate or helipad start location."""

    kind: StartPositionType = Field(..., alias="type")
    name: str = Field(..., min_length=1)
    airport: str = Field(..., min_length=1)
    heading: float | None = Field(default=None, ge=0, lt=360)
    index: int = Field(
        default=0,
        ge=0,
        description="Index in the airport's startup locations/runways/helipads list",
    )
    xplane_index: int | str | None = Field(
        default=None,
        description="Simulator index: sorted ramp position, or 'row_end' for runways",
    )
