"""Map view state: which layers are drawn, night mode, camera and debug pick.

Like ``LaunchConfigState`` the snapshot is split in two.  Layer and
navigation visibility plus night mode form the durable
``MapViewPreferences``; camera, debug and VATSIM flags live in the
volatile ``MapViewSession``.
"""

from typing import Any

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from xpdispatch.contracts.common import StateModel
from xpdispatch.contracts.enums import AirwaysMode, FeatureType

MAP_VIEW_VERSION = 1


class LayerVisibility(StateModel):
    """Airport layers, grouped as surfaces, markings, lights, objects, effects."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    runways: bool = True
    taxiways: bool = True
    pavements: bool = True
    boundaries: bool = True

    runway_markings: bool = True
    linear_features: bool = True
    signs: bool = True

    runway_lights: bool = True
    taxiway_lights: bool = True
    approach_lights: bool = True

    gates: bool = True
    windsocks: bool = True

    animations: bool = True
    weather: bool = True


class NavLayerVisibility(StateModel):
    """Navaid, airspace and airway layers."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    vors: bool = True
    ndbs: bool = True
    dmes: bool = False
    ils: bool = True
    waypoints: bool = False
    airspaces: bool = True
    airways_mode: AirwaysMode = AirwaysMode.OFF


class FeatureDebugInfo(StateModel):
    """The airport feature last clicked while debug mode is on."""

    kind: FeatureType = Field(default=FeatureType.UNKNOWN, alias="type")
    name: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    coordinates: tuple[float, float] | tuple[tuple[float, float], ...] | None = None
    raw_data: str | None = Field(default=None, description="Source apt.dat row(s)")


class MapViewSession(StateModel):
    current_zoom: float = 2
    map_bearing: float = 0
    debug_enabled: bool = False
    selected_feature: FeatureDebugInfo | None = None
    vatsim_enabled: bool = False


class MapViewPreferences(StateModel):
    """Durable part of the map view store."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    layer_visibility: LayerVisibility = Field(default_factory=LayerVisibility)
    nav_visibility: NavLayerVisibility = Field(default_factory=NavLayerVisibility)
    is_night_mode: bool = False


class MapViewRecord(MapViewPreferences):
    """Durable envelope: ``{"version": 1, "layerVisibility": {...},
    "navVisibility": {...}, "isNightMode": false}``."""

    version: int = MAP_VIEW_VERSION


class MapViewState(StateModel):
    session: MapViewSession = Field(default_factory=MapViewSession)
    durable: MapViewPreferences = Field(default_factory=MapViewPreferences)

    @property
    def layer_visibility(self) -> LayerVisibility:
        return self.durable.layer_visibility

    @property
    def nav_visibility(self) -> NavLayerVisibility:
        return self.durable.nav_visibility

    @property
    def is_night_mode(self) -> bool:
        return self.durable.is_night_mode

    @property
    def current_zoom(self) -> float:
        return self.session.current_zoom

    @property
    def map_bearing(self) -> float:
        return self.session.map_bearing

    @property
    def debug_enabled(self) -> bool:
        return self.session.debug_enabled

    @property
    def selected_feature(self) -> FeatureDebugInfo | None:
        return self.session.selected_feature

    @property
    def vatsim_enabled(self) -> bool:
        return self.session.vatsim_enabled
