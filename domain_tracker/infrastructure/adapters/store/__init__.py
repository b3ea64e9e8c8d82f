"""Record store adapters."""

from .json_file import JsonFileRecordStore
from .memory import InMemoryRecordStore
from .redis_store import RedisRecordStore

__all__ = [
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "RedisRecordStore",
]
