"""Enumerations shared across all xpdispatch contracts."""

from enum import Enum, IntEnum


class ProcedureKind(str, Enum):
    """Kind of terminal procedure attached to an airport."""
    SID = "SID"
    STAR = "STAR"
    APPROACH = "APPROACH"


class TurnDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class StartPositionType(str, Enum):
    """Where the aircraft is placed when the flight starts."""
    RUNWAY = "runway"
    RAMP = "ramp"
    HELIPAD = "helipad"


class SurfaceType(IntEnum):
    """Standard simulator surface codes (apt.dat row codes 1–15)."""
    ASPHALT = 1
    CONCRETE = 2
    TURF_OR_GRASS = 3
    DIRT = 4
    GRAVEL = 5
    DRY_LAKEBED = 12
    WATER_RUNWAY = 13
    SNOW_OR_ICE = 14
    TRANSPARENT = 15


class MapStyleProvider(str, Enum):
    OPENFREEMAP = "openfreemap"
    CARTO = "carto"


class AirwaysMode(str, Enum):
    """Which airway network is drawn; only one at a time."""
    OFF = "off"
    HIGH = "high"
    LOW = "low"


class FeatureType(str, Enum):
    """Kind of airport feature picked in debug mode."""
    LINE = "line"
    SIGN = "sign"
    GATE = "gate"
    RUNWAY = "runway"
    TAXIWAY = "taxiway"
    UNKNOWN = "unknown"
