"""Surface classification code → map fill and outline colors.

Colors approximate real-world surface appearance.  Codes follow the
simulator's apt.dat format: standard types 1–15, XP12 extended types
20–38 and XP12 marked runway/apron types 50–57.
"""

from __future__ import annotations

import math
import re

from xpdispatch.contracts.enums import SurfaceType

TRANSPARENT = "transparent"

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")

# Unknown code fill
_FALLBACK_FILL = "#3a3a3a"

# Outline = fill lightened by this many percent
_OUTLINE_LIGHTEN_PERCENT = 15

# Match-expression defaults used by the pavement/taxiway layers
PAVEMENT_FILL_FALLBACK = "#444444"
PAVEMENT_OUTLINE_FALLBACK = "#555555"

_SURFACE_COLORS: dict[int, str] = {
    # Standard surface types
    SurfaceType.ASPHALT: "#2a2a2a",  # aged asphalt
    SurfaceType.CONCRETE: "#a0a0a0",
    SurfaceType.TURF_OR_GRASS: "#3d6b35",
    SurfaceType.DIRT: "#8b6914",
    SurfaceType.GRAVEL: "#9e9e9e",
    SurfaceType.DRY_LAKEBED: "#c4a35a",
    SurfaceType.WATER_RUNWAY: "#1e5799",
    SurfaceType.SNOW_OR_ICE: "#e8e8e8",
    SurfaceType.TRANSPARENT: TRANSPARENT,

    # XP12 extended surface types
    20: "#252525",  # fresh asphalt
    21: "#2f2f2f",  # worn asphalt
    22: "#3a3a3a",  # patched asphalt
    23: "#5e5e5e",  # fresh concrete
    24: "#707070",  # worn concrete
    25: "#7a7a7a",  # patched concrete
    26: "#3d6b35",  # dense grass
    27: "#4a7d40",  # normal grass
    28: "#5c8f4c",  # sparse grass
    29: "#7a5c3a",  # dry dirt
    30: "#8b6914",  # moist dirt
    31: "#a8a8a8",  # fine gravel
    32: "#8e8e8e",  # medium gravel
    33: "#787878",  # coarse gravel
    34: "#c4a35a",  # light dry lakebed
    35: "#b39550",  # dark dry lakebed
    36: "#d4d4d4",  # fresh snow
    37: "#c0c0c0",  # packed snow
    38: "#b8d4e8",  # ice

    # XP12 runway markings
    50: "#2a2a2a",  # asphalt with markings
    51: "#6a6a6a",  # concrete with markings
    52: "#2a2a2a",  # dark asphalt variation
    53: "#333333",  # runway asphalt
    54: "#5a5a5a",  # taxiway concrete
    55: "#4a4a4a",  # apron asphalt
    56: "#656565",  # apron concrete
    57: "#2e2e2e",  # high contrast runway
}

SURFACE_TYPES: tuple[int, ...] = tuple(sorted(int(code) for code in _SURFACE_COLORS))


def resolve_fill_color(code: int) -> str:
    """Fill color for a surface code.  Unknown codes get ``#3a3a3a``."""
    return _SURFACE_COLORS.get(code, _FALLBACK_FILL)


def resolve_outline_color(code: int) -> str:
    """Outline color: the fill lightened by 15%, no outline for transparent."""
    fill = resolve_fill_color(code)
    if fill == TRANSPARENT:
        return TRANSPARENT
    return lighten(fill, _OUTLINE_LIGHTEN_PERCENT)


def lighten(color: str, percent: int) -> str:
    """Add ``round(2.55 * percent)`` to each RGB channel, saturating at 0 and 255.

    This is per-channel integer addition, not HSL lightening; existing
    rendered assets depend on the exact values.  Halves round up.

    Raises ``ValueError`` if *color* is not a ``#rrggbb`` hex string.
    """
    digits = color.removeprefix("#")
    if not _HEX_RE.fullmatch(digits):
        raise ValueError(f"Expected a #rrggbb color, got {color!r}")
    value = int(digits, 16)

    amount = math.floor(2.55 * percent + 0.5)
    channels = (value >> 16, (value >> 8) & 0xFF, value & 0xFF)
    r, g, b = (max(0, min(255, c + amount)) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


def surface_palette(outline: bool = False) -> list[tuple[int, str]]:
    """(code, color) pairs for every known code, in code order.

    The pavement and taxiway layers build their match expressions from
    this list, followed by ``PAVEMENT_FILL_FALLBACK`` /
    ``PAVEMENT_OUTLINE_FALLBACK``.
    """
    resolve = resolve_outline_color if outline else resolve_fill_color
    return [(code, resolve(code)) for code in SURFACE_TYPES]
