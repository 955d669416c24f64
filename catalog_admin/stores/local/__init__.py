from .connection import SQLiteConnection
from .object_store import LocalObjectStore
from .record_store import SQLiteRecordStore

__all__ = ["SQLiteConnection", "LocalObjectStore", "SQLiteRecordStore"]
