"""State snapshots held by the stores, and the records they persist.

``SelectionState`` and ``MapSettings`` are single records.
``LaunchConfigState`` is split in two: a volatile ``LaunchSession`` that
starts at its defaults on every process start, and a durable
``FavoritesRecord`` that is mirrored to storage on every change.
"""

from typing import Any

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from xpdispatch.contracts.aircraft import DEFAULT_LIVERY, Aircraft
from xpdispatch.contracts.common import StateModel
from xpdispatch.contracts.enums import MapStyleProvider
from xpdispatch.contracts.position import StartPosition
from xpdispatch.contracts.procedure import SelectedProcedure


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class SelectedAirport(StateModel):
    """The airport the user clicked, with its parsed record.

    ``data`` comes from the airport-data parser and is opaque here:
    it is only compared for equality.
    """

    icao: str
    data: Any = None


class SelectionState(StateModel):
    """What the user is looking at: airport, procedure, start position, panels."""

    selected_airport: SelectedAirport | None = None
    selected_procedure: SelectedProcedure | None = None
    start_position: StartPosition | None = None

    sidebar_visible: bool = True
    settings_visible: bool = False
    launch_dialog_visible: bool = False

    @property
    def selected_icao(self) -> str | None:
        return self.selected_airport.icao if self.selected_airport else None

    @property
    def selected_airport_data(self) -> Any:
        return self.selected_airport.data if self.selected_airport else None


# ---------------------------------------------------------------------------
# Launch configuration
# ---------------------------------------------------------------------------


class LaunchSession(StateModel):
    """Volatile launch configuration, reset on every process start.

    Numeric ranges (fuel 0–100, hour 0–24) are enforced by the widgets,
    not here.
    """

    selected_aircraft: Aircraft | None = None
    selected_livery: str = DEFAULT_LIVERY
    fuel_percentage: float = 50
    time_of_day: float = 12
    use_real_world_time: bool = False
    cold_and_dark: bool = False
    selected_weather: str = "clear"

    is_launching: bool = False
    launch_error: str | None = None


class FavoritesRecord(StateModel):
    """Durable part of the launch store: ``{"favorites": [path, ...]}``.

    Insertion order is display order.  Any other shape is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    favorites: tuple[str, ...] = ()

    @field_validator("favorites", mode="after")
    @classmethod
    def drop_duplicates(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(v))


class LaunchConfigState(StateModel):
    """Everything the launch dialog shows, as one snapshot.

    The two sub-records are exposed flat through read-only properties so
    consumers never need to know which half a field lives in.
    """

    session: LaunchSession = Field(default_factory=LaunchSession)
    durable: FavoritesRecord = Field(default_factory=FavoritesRecord)

    @property
    def selected_aircraft(self) -> Aircraft | None:
        return self.session.selected_aircraft

    @property
    def selected_livery(self) -> str:
        return self.session.selected_livery

    @property
    def fuel_percentage(self) -> float:
        return self.session.fuel_percentage

    @property
    def time_of_day(self) -> float:
        return self.session.time_of_day

    @property
    def use_real_world_time(self) -> bool:
        return self.session.use_real_world_time

    @property
    def cold_and_dark(self) -> bool:
        return self.session.cold_and_dark

    @property
    def selected_weather(self) -> str:
        return self.session.selected_weather

    @property
    def is_launching(self) -> bool:
        return self.session.is_launching

    @property
    def launch_error(self) -> str | None:
        return self.session.launch_error

    @property
    def favorites(self) -> tuple[str, ...]:
        return self.durable.favorites


# ---------------------------------------------------------------------------
# Map settings
# ---------------------------------------------------------------------------


class MapStylePreset(StateModel):
    """A selectable basemap style."""

    id: str
    name: str
    url: str
    provider: MapStyleProvider


MAP_STYLE_PRESETS: tuple[MapStylePreset, ...] = (
    MapStylePreset(
        id="ofm-liberty",
        name="Liberty",
        url="https://tiles.openfreemap.org/styles/liberty",
        provider=MapStyleProvider.OPENFREEMAP,
    ),
    MapStylePreset(
        id="ofm-bright",
        name="Bright",
        url="https://tiles.openfreemap.org/styles/bright",
        provider=MapStyleProvider.OPENFREEMAP,
    ),
    MapStylePreset(
        id="ofm-positron",
        name="Positron",
        url="https://tiles.openfreemap.org/styles/positron",
        provider=MapStyleProvider.OPENFREEMAP,
    ),
    MapStylePreset(
        id="carto-dark",
        name="Dark Matter",
        url="https://basemaps.cartocdn.com/gl/dark-matter-gl-style/style.json",
        provider=MapStyleProvider.CARTO,
    ),
    MapStylePreset(
        id="carto-positron",
        name="Positron",
        url="https://basemaps.cartocdn.com/gl/positron-gl-style/style.json",
        provider=MapStyleProvider.CARTO,
    ),
    MapStylePreset(
        id="carto-voyager",
        name="Voyager",
        url="https://basemaps.cartocdn.com/gl/voyager-gl-style/style.json",
        provider=MapStyleProvider.CARTO,
    ),
)

DEFAULT_MAP_STYLE_URL = MAP_STYLE_PRESETS[0].url


class MapSettings(StateModel):
    """User map preferences.  Stored with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    nav_data_radius_nm: float = Field(default=100, gt=0)
    vatsim_refresh_interval: int = Field(default=15, gt=0, description="seconds")
    map_style_url: str = DEFAULT_MAP_STYLE_URL


MAP_SETTINGS_VERSION = 6


class MapSettingsRecord(StateModel):
    """Durable envelope: ``{"version": 6, "map": {...}}``."""

    model_config = ConfigDict(extra="forbid")

    version: int = MAP_SETTINGS_VERSION
    map: MapSettings = Field(default_factory=MapSettings)
