"""Tests for the SyncDomain and DiscoverZones use cases."""

import asyncio
from datetime import date

import pytest

from domain_tracker.application.exceptions import LookupFailedError
from domain_tracker.application.ports import RegistrationData
from domain_tracker.application.use_cases import DiscoverZones, SyncDomain
from domain_tracker.domain.entities import DomainRecord
from domain_tracker.domain.exceptions import AuthorizationError
from domain_tracker.domain.services import AccessGate
from domain_tracker.domain.value_objects import AccessContext
from domain_tracker.infrastructure.adapters import InMemoryRecordStore

from conftest import CUSTOM_TAG, PROVIDER_TAG, StaticRegistrationLookup, StaticZoneProvider


@pytest.fixture
def sync(
    store: InMemoryRecordStore, registration_lookup: StaticRegistrationLookup, gate: AccessGate
) -> SyncDomain:
    return SyncDomain(store, registration_lookup, gate, custom_tag=CUSTOM_TAG)


@pytest.fixture
def discover(
    store: InMemoryRecordStore,
    registration_lookup: StaticRegistrationLookup,
    zone_provider: StaticZoneProvider,
    gate: AccessGate,
) -> DiscoverZones:
    return DiscoverZones(store, registration_lookup, zone_provider, gate)


class TestSyncDomain:
    """Tests for SyncDomain."""

    def test_successful_lookup_replaces_dates(
        self,
        sync: SyncDomain,
        store: InMemoryRecordStore,
        registration_lookup: StaticRegistrationLookup,
        known_registration: RegistrationData,
    ) -> None:
        registration_lookup.answers["example.com"] = known_registration

        outcome = asyncio.run(sync.execute("example.com", AccessContext.ADMINISTRATOR))

        assert outcome.lookup_succeeded is True
        assert outcome.created is False
        stored = asyncio.run(store.get("example.com"))
        assert stored is not None
        assert stored.registration_date == date(2020, 3, 1)
        assert stored.expiration_date == date(2026, 3, 1)
        assert stored.registrar == "Example Registrar"
        assert stored.system == PROVIDER_TAG

    def test_failed_lookup_keeps_existing_record(
        self, sync: SyncDomain, store: InMemoryRecordStore, managed_record: DomainRecord
    ) -> None:
        outcome = asyncio.run(sync.execute("example.com", AccessContext.ADMINISTRATOR))

        assert outcome.lookup_succeeded is False
        assert asyncio.run(store.get("example.com")) == managed_record

    def test_failed_lookup_creates_unknown_record(
        self, sync: SyncDomain, store: InMemoryRecordStore
    ) -> None:
        outcome = asyncio.run(sync.execute("new.example.com", AccessContext.ADMINISTRATOR))

        assert outcome.created is True
        stored = asyncio.run(store.get("new.example.com"))
        assert stored is not None
        assert stored.system == CUSTOM_TAG
        assert stored.has_unknown_dates

    def test_viewer_is_rejected(
        self, sync: SyncDomain, registration_lookup: StaticRegistrationLookup
    ) -> None:
        with pytest.raises(AuthorizationError):
            asyncio.run(sync.execute("example.com", AccessContext.VIEWER))
        assert registration_lookup.calls == []


class TestDiscoverZones:
    """Tests for DiscoverZones."""

    def test_new_zones_are_created_as_top_level(
        self,
        discover: DiscoverZones,
        store: InMemoryRecordStore,
        registration_lookup: StaticRegistrationLookup,
        known_registration: RegistrationData,
    ) -> None:
        registration_lookup.answers["example.net"] = known_registration

        result = asyncio.run(discover.execute(AccessContext.ADMINISTRATOR))

        assert result.zones == 2
        assert result.created == ["example.net"]
        assert result.unchanged == ["example.com"]
        stored = asyncio.run(store.get("example.net"))
        assert stored is not None
        assert stored.system == PROVIDER_TAG
        assert stored.expiration_date == date(2026, 3, 1)

    def test_known_values_are_not_overwritten(
        self,
        discover: DiscoverZones,
        store: InMemoryRecordStore,
        registration_lookup: StaticRegistrationLookup,
        managed_record: DomainRecord,
        known_registration: RegistrationData,
    ) -> None:
        registration_lookup.answers["example.com"] = known_registration

        asyncio.run(discover.execute(AccessContext.ADMINISTRATOR))

        assert asyncio.run(store.get("example.com")) == managed_record
        assert "example.com" not in registration_lookup.calls

    def test_unknown_fields_are_filled(
        self,
        store: InMemoryRecordStore,
        registration_lookup: StaticRegistrationLookup,
        gate: AccessGate,
        known_registration: RegistrationData,
    ) -> None:
        asyncio.run(
            store.put(
                DomainRecord(
                    domain="example.net",
                    system=PROVIDER_TAG,
                    registrar="Kept Registrar",
                    registration_date=date(2019, 1, 1),
                )
            )
        )
        registration_lookup.answers["example.net"] = known_registration
        discover = DiscoverZones(store, registration_lookup, StaticZoneProvider(["example.net"]), gate)

        result = asyncio.run(discover.execute(AccessContext.ADMINISTRATOR))

        assert result.refreshed == ["example.net"]
        stored = asyncio.run(store.get("example.net"))
        assert stored is not None
        assert stored.registrar == "Kept Registrar"
        assert stored.registration_date == date(2019, 1, 1)
        assert stored.expiration_date == date(2026, 3, 1)

    def test_lookup_failure_still_seeds_record(
        self, discover: DiscoverZones, store: InMemoryRecordStore
    ) -> None:
        result = asyncio.run(discover.execute(AccessContext.ADMINISTRATOR))

        assert result.lookup_failures == ["example.net"]
        assert result.created == ["example.net"]
        stored = asyncio.run(store.get("example.net"))
        assert stored is not None
        assert stored.has_unknown_dates

    def test_invalid_zone_names_are_skipped(
        self, store: InMemoryRecordStore, registration_lookup: StaticRegistrationLookup, gate: AccessGate
    ) -> None:
        zones = StaticZoneProvider(["bad zone", "Good.Example.ORG"])
        discover = DiscoverZones(store, registration_lookup, zones, gate)

        result = asyncio.run(discover.run_unattended())

        assert result.skipped == ["bad zone"]
        assert result.created == ["good.example.org"]

    def test_zone_listing_failure_writes_nothing(
        self,
        store: InMemoryRecordStore,
        registration_lookup: StaticRegistrationLookup,
        failing_zone_provider: StaticZoneProvider,
        gate: AccessGate,
    ) -> None:
        before = asyncio.run(store.list())
        discover = DiscoverZones(store, registration_lookup, failing_zone_provider, gate)

        with pytest.raises(LookupFailedError):
            asyncio.run(discover.execute(AccessContext.ADMINISTRATOR))

        assert asyncio.run(store.list()) == before
        assert registration_lookup.calls == []

    def test_viewer_is_rejected(self, discover: DiscoverZones, store: InMemoryRecordStore) -> None:
        with pytest.raises(AuthorizationError):
            asyncio.run(discover.execute(AccessContext.VIEWER))
        assert len(asyncio.run(store.list())) == 2

    def test_summary(self, discover: DiscoverZones) -> None:
        result = asyncio.run(discover.run_unattended())
        assert result.get_summary() == "2 zones: 1 created, 0 refreshed, 1 unchanged, 1 lookup failures"
