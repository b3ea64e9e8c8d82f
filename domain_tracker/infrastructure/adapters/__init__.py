"""Infrastructure adapters - Implementations of application ports."""

from .cloudflare import CloudflareConfig, CloudflareZoneProvider
from .store import InMemoryRecordStore, JsonFileRecordStore, RedisRecordStore
from .whois import WhoisProxyConfig, WhoisProxyLookup

__all__ = [
    "CloudflareConfig",
    "CloudflareZoneProvider",
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "RedisRecordStore",
    "WhoisProxyConfig",
    "WhoisProxyLookup",
]
