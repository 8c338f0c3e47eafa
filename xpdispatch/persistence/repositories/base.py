"""Generic repository for one record model stored under one storage key."""

from __future__ import annotations

import json
import logging
from typing import Generic, Type, TypeVar

from pydantic import ValidationError

from xpdispatch.contracts.common import StateModel
from xpdispatch.persistence.errors import CorruptRecordError
from xpdispatch.persistence.storage import KeyValueStorage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=StateModel)


class KeyedRecordRepository(Generic[T]):
    """Load/save a single record as JSON under a fixed key.

    Serialization relies entirely on the contract's ``to_storage()``
    and ``from_storage()`` methods, with no extra mapping layer.
    """

    def __init__(self, storage: KeyValueStorage, model_class: Type[T], key: str):
        self._storage = storage
        self._model_class = model_class
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load_raw(self) -> dict | None:
        """Return the decoded JSON object, or *None* if the key is absent.

        Raises ``StorageReadError`` from the backend, or
        ``CorruptRecordError`` if the text is not a JSON object.
        """
        text = self._storage.get_item(self._key)
        if text is None:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptRecordError(self._key, str(exc)) from exc
        if not isinstance(data, dict):
            raise CorruptRecordError(self._key, f"expected an object, got {type(data).__name__}")
        return data

    def load(self) -> T | None:
        """Fetch the record. Returns *None* if missing."""
        data = self.load_raw()
        if data is None:
            return None
        return self.validate(data)

    def validate(self, data: dict) -> T:
        try:
            return self._model_class.from_storage(data)
        except ValidationError as exc:
            raise CorruptRecordError(self._key, f"{exc.error_count()} validation error(s)") from exc

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, record: T) -> None:
        """Overwrite the stored record with *record*."""
        self._storage.set_item(self._key, json.dumps(record.to_storage(), ensure_ascii=False))

    def delete(self) -> None:
        self._storage.remove_item(self._key)


class VersionedRecordRepository(KeyedRecordRepository[T]):
    """A keyed record whose top-level ``version`` field gates loading.

    Records written by older releases carried a different schema; they
    are migrated by discarding them in favour of ``model_class()``
    defaults.  A newer or non-integer version is corrupt.
    """

    version: int = 1

    def load(self) -> T | None:
        data = self.load_raw()
        if data is None:
            return None

        version = data.get("version", 0)
        if not isinstance(version, int) or isinstance(version, bool):
            raise CorruptRecordError(self._key, f"bad version {version!r}")
        if version < self.version:
            logger.info(
                "Migrating %s from version %d to %d (reset to defaults)",
                self._key, version, self.version,
            )
            return self._model_class()
        if version > self.version:
            raise CorruptRecordError(self._key, f"unsupported future version {version}")
        return self.validate(data)
