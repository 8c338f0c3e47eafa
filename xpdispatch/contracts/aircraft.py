"""Aircraft and Livery: entries of the simulator's aircraft catalogue.

Produced by the aircraft-catalogue scanner.  The launch store holds the
selected aircraft opaquely and only uses ``path`` as its identity.
"""

from pydantic import Field

from xpdispatch.contracts.common import StateModel

DEFAULT_LIVERY = "Default"


class Livery(StateModel):
    """A paint scheme shipped with an aircraft."""

    name: str = Field(..., min_length=1, description="Folder name under liveries/")
    display_name: str | None = None
    preview_image: str | None = None


class Aircraft(StateModel):
    """An installed aircraft, identified by its .acf path."""

    path: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    icao: str = ""
    description: str = ""
    manufacturer: str = ""
    studio: str = ""
    author: str = ""
    tail_number: str = ""

    empty_weight: float = Field(default=0, ge=0, description="kg")
    max_weight: float = Field(default=0, ge=0, description="kg")
    max_fuel: float = Field(default=0, ge=0, description="kg")
    tank_names: tuple[str, ...] = ()

    is_helicopter: bool = False
    engine_count: int = Field(default=1, ge=0)
    prop_count: int = Field(default=0, ge=0)
    vne_kts: float | None = None
    vno_kts: float | None = None

    preview_image: str | None = None
    thumbnail_image: str | None = None
    liveries: tuple[Livery, ...] = ()

    def livery_names(self) -> list[str]:
        """Names selectable for this aircraft, the default first."""
        return [DEFAULT_LIVERY] + [lv.name for lv in self.liveries if lv.name != DEFAULT_LIVERY]
