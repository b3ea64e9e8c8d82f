"""Application ports - Interfaces for external adapters."""

from .record_store import RecordStore
from .registration_lookup import RegistrationData, RegistrationLookup
from .zone_provider import ZoneProvider

__all__ = [
    "RecordStore",
    "RegistrationData",
    "RegistrationLookup",
    "ZoneProvider",
]
