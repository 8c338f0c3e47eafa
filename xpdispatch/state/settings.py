"""Map settings store: navdata radius, VATSIM refresh interval, basemap style."""

from __future__ import annotations

import logging
from typing import Any

from xpdispatch.contracts.state import MapSettings, MapSettingsRecord
from xpdispatch.persistence.errors import PersistenceError
from xpdispatch.persistence.repositories.settings_repo import MapSettingsRepository
from xpdispatch.persistence.storage import KeyValueStorage
from xpdispatch.state.store import Store

logger = logging.getLogger(__name__)


class MapSettingsStore(Store[MapSettings]):
    """Persisted in full on every change."""

    name = "settings"

    def __init__(self, storage: KeyValueStorage):
        self._repo = MapSettingsRepository(storage)
        super().__init__(self._rehydrate())

    def _rehydrate(self) -> MapSettings:
        try:
            record = self._repo.load()
        except PersistenceError as exc:
            logger.warning("Ignoring stored map settings: %s", exc)
            return MapSettings()
        return record.map if record else MapSettings()

    def _on_change(self, previous: MapSettings, current: MapSettings) -> None:
        try:
            self._repo.save(MapSettingsRecord(map=current))
        except PersistenceError as exc:
            logger.warning("Failed to persist map settings: %s", exc)

    def update_map_settings(self, **changes: Any) -> None:
        """Merge *changes* into the current settings.

        Raises ``TypeError`` for unknown setting names and pydantic's
        ``ValidationError`` for out-of-range values.
        """
        unknown = set(changes) - set(MapSettings.model_fields)
        if unknown:
            raise TypeError(f"Unknown map setting(s): {', '.join(sorted(unknown))}")
        self._set(**changes)

    def reset_to_defaults(self) -> None:
        self._apply(lambda state: MapSettings())
