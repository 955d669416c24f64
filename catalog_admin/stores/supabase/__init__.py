from .object_store import SupabaseObjectStore
from .record_store import SupabaseRecordStore

__all__ = ["SupabaseObjectStore", "SupabaseRecordStore"]
