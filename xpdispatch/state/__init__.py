"""Observable state stores for the dispatch UI.

- ``SelectionStore``: airport / procedure / start position / panels
- ``LaunchConfigStore``: aircraft and flight conditions, persisted favorites
- ``MapSettingsStore``: persisted map preferences
- ``MapViewStore``: layer visibility and night mode (persisted), camera and debug

Use the ``registry`` getters to reach the process-wide instances.
"""

from xpdispatch.state.errors import InvariantViolation, StateError
from xpdispatch.state.launch import LaunchConfigStore
from xpdispatch.state.map_view import MapViewStore
from xpdispatch.state.registry import (
    get_launch_store,
    get_map_view_store,
    get_selection_store,
    get_settings_store,
)
from xpdispatch.state.selection import SelectionStore
from xpdispatch.state.settings import MapSettingsStore
from xpdispatch.state.store import Store

__all__ = [
    "InvariantViolation",
    "StateError",
    "Store",
    "SelectionStore",
    "LaunchConfigStore",
    "MapSettingsStore",
    "MapViewStore",
    "get_selection_store",
    "get_launch_store",
    "get_settings_store",
    "get_map_view_store",
]
