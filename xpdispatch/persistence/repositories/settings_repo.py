"""Repository for the versioned map settings record."""

from __future__ import annotations

from xpdispatch.contracts.state import MAP_SETTINGS_VERSION, MapSettingsRecord
from xpdispatch.persistence.repositories.base import VersionedRecordRepository
from xpdispatch.persistence.storage import KeyValueStorage

SETTINGS_KEY = "xplane-viz-settings"


class MapSettingsRepository(VersionedRecordRepository[MapSettingsRecord]):
    """Stored at ``xplane-viz-settings`` as ``{"version": 6, "map": {...}}``."""

    version = MAP_SETTINGS_VERSION

    def __init__(self, storage: KeyValueStorage):
        super().__init__(storage, MapSettingsRecord, SETTINGS_KEY)
