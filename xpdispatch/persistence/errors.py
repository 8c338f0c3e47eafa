"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class StorageReadError(PersistenceError):
    """Raised when a storage backend cannot read a key."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"cannot read {key!r}" + (f": {reason}" if reason else ""))


class StorageWriteError(PersistenceError):
    """Raised when a storage backend cannot write or remove a key."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"cannot write {key!r}" + (f": {reason}" if reason else ""))


class CorruptRecordError(PersistenceError):
    """Raised when a stored payload is not valid JSON or has the wrong shape."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"corrupt record {key!r}" + (f": {reason}" if reason else ""))
