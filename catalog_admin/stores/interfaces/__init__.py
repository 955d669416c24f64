from .object_store import IObjectStore
from .record_store import IRecordStore, Join

__all__ = ["IObjectStore", "IRecordStore", "Join"]
