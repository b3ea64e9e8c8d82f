"""Pytest configuration, shared fixtures and test doubles."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from domain_tracker.application.exceptions import LookupFailedError, StoreUnavailableError
from domain_tracker.application.ports import RegistrationData
from domain_tracker.domain.entities import DomainRecord
from domain_tracker.domain.services import AccessGate, ExpirationCalculator
from domain_tracker.domain.value_objects import ExpirationThresholds
from domain_tracker.infrastructure.adapters import InMemoryRecordStore

PROVIDER_TAG = "Cloudflare"
CUSTOM_TAG = "custom"
VIEWER_SECRET = "viewer-pass"
ADMIN_SECRET = "admin-pass"


class StaticRegistrationLookup:
    """Registration lookup answering from a fixed table; unlisted domains fail."""

    def __init__(self, answers: dict[str, RegistrationData] | None = None) -> None:
        self.answers = answers or {}
        self.calls: list[str] = []

    def is_configured(self) -> bool:
        return True

    async def lookup(self, domain: str) -> RegistrationData:
        self.calls.append(domain)
        return self.answers.get(domain, RegistrationData.unknown())


class StaticZoneProvider:
    """Zone provider returning a fixed zone list, or failing when told to."""

    provider_tag = PROVIDER_TAG

    def __init__(self, zones: list[str] | None = None, *, fail: bool = False) -> None:
        self.zones = zones or []
        self.fail = fail

    async def list_zones(self) -> list[str]:
        if self.fail:
            msg = "zone listing unavailable"
            raise LookupFailedError(msg)
        return list(self.zones)


class UnavailableRecordStore:
    """Record store whose every operation fails."""

    async def get(self, domain: str) -> DomainRecord | None:
        raise StoreUnavailableError("store offline")

    async def list(self) -> list[DomainRecord]:
        raise StoreUnavailableError("store offline")

    async def put(self, record: DomainRecord) -> None:
        raise StoreUnavailableError("store offline")

    async def delete(self, domain: str) -> None:
        raise StoreUnavailableError("store offline")

    async def close(self) -> None:
        pass


@pytest.fixture
def default_thresholds() -> ExpirationThresholds:
    """Default severity thresholds."""
    return ExpirationThresholds(critical=7, warning=30)


@pytest.fixture
def calculator(default_thresholds: ExpirationThresholds) -> ExpirationCalculator:
    return ExpirationCalculator(default_thresholds)


@pytest.fixture
def gate() -> AccessGate:
    """Gate with both a viewer and an administrator secret."""
    return AccessGate(viewer_secret=VIEWER_SECRET, admin_secret=ADMIN_SECRET)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 7, 2, tzinfo=UTC)


@pytest.fixture
def known_registration() -> RegistrationData:
    return RegistrationData(
        registration_date=date(2020, 3, 1),
        expiration_date=date(2026, 3, 1),
        registrar="Example Registrar",
    )


@pytest.fixture
def managed_record() -> DomainRecord:
    """A provider-managed record with both dates known."""
    return DomainRecord(
        domain="example.com",
        system=PROVIDER_TAG,
        registrar="Cloudflare, Inc.",
        registration_date=date(2024, 1, 1),
        expiration_date=date(2025, 1, 1),
    )


@pytest.fixture
def custom_record() -> DomainRecord:
    """A manually entered record with Unknown dates."""
    return DomainRecord(domain="blog.example.org", system=CUSTOM_TAG)


@pytest.fixture
def store(managed_record: DomainRecord, custom_record: DomainRecord) -> InMemoryRecordStore:
    return InMemoryRecordStore([managed_record, custom_record])


@pytest.fixture
def registration_lookup() -> StaticRegistrationLookup:
    """Lookup double that fails for every domain until answers are added."""
    return StaticRegistrationLookup()


@pytest.fixture
def zone_provider() -> StaticZoneProvider:
    return StaticZoneProvider(["example.com", "example.net"])


@pytest.fixture
def failing_zone_provider() -> StaticZoneProvider:
    return StaticZoneProvider(fail=True)


@pytest.fixture
def unavailable_store() -> UnavailableRecordStore:
    return UnavailableRecordStore()
