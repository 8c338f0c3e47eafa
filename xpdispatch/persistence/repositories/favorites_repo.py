"""Repository for the launch store's favorite aircraft paths."""

from __future__ import annotations

from xpdispatch.contracts.state import FavoritesRecord
from xpdispatch.persistence.repositories.base import KeyedRecordRepository
from xpdispatch.persistence.storage import KeyValueStorage

LAUNCH_STORE_KEY = "launch-store"


class FavoritesRepository(KeyedRecordRepository[FavoritesRecord]):
    """Stored at ``launch-store`` as ``{"favorites": [path, ...]}``."""

    def __init__(self, storage: KeyValueStorage):
        super().__init__(storage, FavoritesRecord, LAUNCH_STORE_KEY)
