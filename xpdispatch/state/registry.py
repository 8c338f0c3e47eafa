"""Process-wide store instances.

Each store is created lazily on first access and lives for the rest of
the process.  All persisted stores share the storage from
``get_storage()``.
"""

from __future__ import annotations

import logging

from xpdispatch.persistence.storage import get_storage
from xpdispatch.state.launch import LaunchConfigStore
from xpdispatch.state.map_view import MapViewStore
from xpdispatch.state.selection import SelectionStore
from xpdispatch.state.settings import MapSettingsStore

logger = logging.getLogger(__name__)

_selection: SelectionStore | None = None
_launch: LaunchConfigStore | None = None
_settings: MapSettingsStore | None = None
_map_view: MapViewStore | None = None


def get_selection_store() -> SelectionStore:
    global _selection
    if _selection is None:
        _selection = SelectionStore()
    return _selection


def get_launch_store() -> LaunchConfigStore:
    global _launch
    if _launch is None:
        _launch = LaunchConfigStore(get_storage())
        logger.info("Launch store ready (%d favorite(s))", len(_launch.get_state().favorites))
    return _launch


def get_settings_store() -> MapSettingsStore:
    global _settings
    if _settings is None:
        _settings = MapSettingsStore(get_storage())
    return _settings


def get_map_view_store() -> MapViewStore:
    global _map_view
    if _map_view is None:
        _map_view = MapViewStore(get_storage())
    return _map_view


def _reset_stores() -> None:
    """Drop all instances (for testing only)."""
    global _selection, _launch, _settings, _map_view
    _selection = None
    _launch = None
    _settings = None
    _map_view = None
