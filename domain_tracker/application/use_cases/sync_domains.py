"""Use cases refreshing registration data from external sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.entities import DomainRecord
from ...domain.exceptions import ValidationError
from ...domain.services import AccessGate
from ...domain.value_objects import AccessContext, normalize_domain
from ..ports import RecordStore, RegistrationData, RegistrationLookup, ZoneProvider

logger = logging.getLogger(__name__)


def apply_registration(
    record: DomainRecord, data: RegistrationData, *, only_unknown: bool
) -> DomainRecord:
    """
    Apply looked-up registration data to a record.

    Lookup dates that would break the record's date ordering are discarded
    and the record is returned unchanged.
    """
    try:
        return record.with_registration(
            registrar=data.registrar,
            registration_date=data.registration_date,
            expiration_date=data.expiration_date,
            only_unknown=only_unknown,
        )
    except ValidationError:
        logger.warning("Lookup dates for %s conflict with stored dates; ignoring", record.domain)
        return record


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Result of an explicit single-domain sync."""

    record: DomainRecord
    lookup_succeeded: bool
    created: bool = False


class SyncDomain:
    """Re-syncs one record's dates from the registration lookup on request."""

    def __init__(
        self,
        store: RecordStore,
        lookup: RegistrationLookup,
        gate: AccessGate,
        *,
        custom_tag: str,
    ) -> None:
        self._store = store
        self._lookup = lookup
        self._gate = gate
        self._custom_tag = custom_tag

    async def execute(self, domain: str, context: AccessContext) -> SyncOutcome:
        """
        Refresh a record from the lookup service.

        A successful lookup replaces the stored dates. A failed lookup leaves
        an existing record untouched and stores a new one with Unknown dates.

        Raises:
            AuthorizationError: If the context is not an administrator.
            ValidationError: If the domain name is malformed.
            StoreUnavailableError: If the store fails.
        """
        self._gate.require_admin(context)
        key = normalize_domain(domain)

        existing = await self._store.get(key)
        record = existing or DomainRecord(domain=key, system=self._custom_tag)

        data = await self._lookup.lookup(key)
        if data.is_known:
            record = apply_registration(record, data, only_unknown=False)
        else:
            logger.warning("Registration lookup failed for %s", key)

        if existing is None or record != existing:
            await self._store.put(record)

        return SyncOutcome(record=record, lookup_succeeded=data.is_known, created=existing is None)


@dataclass(slots=True)
class DiscoveryResult:
    """Summary of one zone discovery pass."""

    zones: int = 0
    created: list[str] = field(default_factory=list)
    refreshed: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    lookup_failures: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the pass."""
        return (
            f"{self.zones} zones: {len(self.created)} created, "
            f"{len(self.refreshed)} refreshed, {len(self.unchanged)} unchanged, "
            f"{len(self.lookup_failures)} lookup failures"
        )


class DiscoverZones:
    """
    Seeds top-level records from the DNS provider's zone listing.

    Existing records keep their registrar and dates unless a date is Unknown,
    in which case only the Unknown fields are filled.
    """

    def __init__(
        self,
        store: RecordStore,
        lookup: RegistrationLookup,
        zones: ZoneProvider,
        gate: AccessGate,
    ) -> None:
        self._store = store
        self._lookup = lookup
        self._zones = zones
        self._gate = gate

    async def execute(self, context: AccessContext) -> DiscoveryResult:
        """
        Run a discovery pass on behalf of an administrator.

        Raises:
            AuthorizationError: If the context is not an administrator.
            LookupFailedError: If the zone listing fails; nothing is written.
            StoreUnavailableError: If the store fails.
        """
        self._gate.require_admin(context)
        return await self.run_unattended()

    async def run_unattended(self) -> DiscoveryResult:
        """Run a discovery pass triggered by the process itself."""
        zone_names = await self._zones.list_zones()
        logger.info("Discovered %d zones from %s", len(zone_names), self._zones.provider_tag)

        result = DiscoveryResult(zones=len(zone_names))
        for name in zone_names:
            try:
                domain = normalize_domain(name)
            except ValidationError:
                logger.warning("Skipping zone with invalid name %r", name)
                result.skipped.append(name)
                continue
            await self._seed(domain, result)

        logger.info("Discovery complete: %s", result.get_summary())
        return result

    async def _seed(self, domain: str, result: DiscoveryResult) -> None:
        existing = await self._store.get(domain)
        if existing is not None and not existing.has_unknown_dates:
            result.unchanged.append(domain)
            return

        data = await self._lookup.lookup(domain)
        if not data.is_known:
            result.lookup_failures.append(domain)

        if existing is None:
            record = apply_registration(
                DomainRecord(domain=domain, system=self._zones.provider_tag),
                data,
                only_unknown=True,
            )
            await self._store.put(record)
            result.created.append(domain)
            return

        record = apply_registration(existing, data, only_unknown=True)
        if record == existing:
            result.unchanged.append(domain)
            return

        await self._store.put(record)
        result.refreshed.append(domain)
