"""Repository for the map view's persisted layer preferences."""

from __future__ import annotations

from xpdispatch.contracts.map_view import MAP_VIEW_VERSION, MapViewPreferences, MapViewRecord
from xpdispatch.persistence.repositories.base import VersionedRecordRepository
from xpdispatch.persistence.storage import KeyValueStorage

MAP_VIEW_KEY = "xplane-viz-map"


class MapViewRepository(VersionedRecordRepository[MapViewRecord]):
    """Stored at ``xplane-viz-map`` as the preferences plus ``"version": 1``."""

    version = MAP_VIEW_VERSION

    def __init__(self, storage: KeyValueStorage):
        super().__init__(storage, MapViewRecord, MAP_VIEW_KEY)

    def load_preferences(self) -> MapViewPreferences | None:
        record = self.load()
        if record is None:
            return None
        return MapViewPreferences.model_validate(record.model_dump(exclude={"version"}))

    def save_preferences(self, preferences: MapViewPreferences) -> None:
        self.save(MapViewRecord.model_validate(dict(preferences)))
