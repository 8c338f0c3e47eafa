"""xpdispatch data contracts — Pydantic v2 models for the dispatch state layer.

Data authority
--------------

**Durable storage** (source of truth across restarts, one key per record):
- ``FavoritesRecord`` — ``launch-store``
- ``MapSettingsRecord`` — ``xplane-viz-settings``
- ``MapViewRecord`` — ``xplane-viz-map`` (layer visibility, night mode)

**Process memory only** (reset to defaults on every start):
- ``SelectionState`` — airport, procedure, start position, panel flags
- ``LaunchSession`` — aircraft, livery, fuel, time, weather, launch status
- ``MapViewSession`` — zoom, bearing, debug pick, VATSIM toggle

**Supplied by collaborators** (held opaquely, never edited here):
- ``SelectedAirport.data`` — parsed airport record
- ``SelectedProcedure`` / ``Waypoint`` — CIFP procedure legs
- ``Aircraft`` / ``Livery`` — aircraft catalogue entries
- ``StartPosition`` — runway/ramp/helipad start location
"""

from xpdispatch.contracts.enums import (
    AirwaysMode,
    FeatureType,
    MapStyleProvider,
    ProcedureKind,
    StartPositionType,
    SurfaceType,
    TurnDirection,
)
from xpdispatch.contracts.common import Coordinates, StateModel
from xpdispatch.contracts.aircraft import DEFAULT_LIVERY, Aircraft, Livery
from xpdispatch.contracts.position import StartPosition
from xpdispatch.contracts.procedure import (
    AltitudeConstraint,
    ResolvedPosition,
    SelectedProcedure,
    Waypoint,
)
from xpdispatch.contracts.state import (
    DEFAULT_MAP_STYLE_URL,
    MAP_SETTINGS_VERSION,
    MAP_STYLE_PRESETS,
    FavoritesRecord,
    LaunchConfigState,
    LaunchSession,
    MapSettings,
    MapSettingsRecord,
    MapStylePreset,
    SelectedAirport,
    SelectionState,
)
from xpdispatch.contracts.map_view import (
    MAP_VIEW_VERSION,
    FeatureDebugInfo,
    LayerVisibility,
    MapViewPreferences,
    MapViewRecord,
    MapViewSession,
    MapViewState,
    NavLayerVisibility,
)

__all__ = [
    # Enums
    "AirwaysMode",
    "FeatureType",
    "MapStyleProvider",
    "ProcedureKind",
    "StartPositionType",
    "SurfaceType",
    "TurnDirection",
    # Common
    "Coordinates",
    "StateModel",
    # Collaborator records
    "DEFAULT_LIVERY",
    "Aircraft",
    "Livery",
    "StartPosition",
    "AltitudeConstraint",
    "ResolvedPosition",
    "SelectedProcedure",
    "Waypoint",
    # State
    "DEFAULT_MAP_STYLE_URL",
    "MAP_SETTINGS_VERSION",
    "MAP_STYLE_PRESETS",
    "FavoritesRecord",
    "LaunchConfigState",
    "LaunchSession",
    "MapSettings",
    "MapSettingsRecord",
    "MapStylePreset",
    "SelectedAirport",
    "SelectionState",
    # Map view
    "MAP_VIEW_VERSION",
    "FeatureDebugInfo",
    "LayerVisibility",
    "MapViewPreferences",
    "MapViewRecord",
    "MapViewSession",
    "MapViewState",
    "NavLayerVisibility",
]
