"""Use cases for reading the tracked domain set."""

import logging
from datetime import UTC, date, datetime

from ...domain.entities import DomainEntry, DomainOverview, DomainRecord
from ...domain.services import AccessGate, ExpirationCalculator, classify
from ...domain.value_objects import AccessContext, normalize_domain
from ..exceptions import RecordNotFoundError
from ..ports import RecordStore

logger = logging.getLogger(__name__)


class ViewDomains:
    """Lists, classifies and computes the status of every tracked domain."""

    def __init__(
        self,
        store: RecordStore,
        gate: AccessGate,
        calculator: ExpirationCalculator,
        *,
        provider_tag: str,
    ) -> None:
        self._store = store
        self._gate = gate
        self._calculator = calculator
        self._provider_tag = provider_tag

    async def execute(
        self, context: AccessContext, now: datetime | date | None = None
    ) -> DomainOverview:
        """
        Build the categorized overview for a reader.

        Raises:
            AuthorizationError: If the context may not read.
            StoreUnavailableError: If the store cannot be listed.
        """
        self._gate.require_read(context)
        now = now or datetime.now(UTC)

        records = await self._store.list()
        view = classify(records, self._provider_tag)
        logger.debug(
            "Classified %d records: %d top-level, %d second-level/custom",
            view.total_count,
            len(view.top_level),
            len(view.second_level_and_custom),
        )

        return DomainOverview(
            top_level=[self._entry(r, now) for r in view.top_level],
            second_level_and_custom=[self._entry(r, now) for r in view.second_level_and_custom],
            access=context,
        )

    def _entry(self, record: DomainRecord, now: datetime | date) -> DomainEntry:
        return DomainEntry(record=record, status=self._calculator.compute_status(record, now))


class GetDomain:
    """Reads a single tracked domain with its status."""

    def __init__(
        self, store: RecordStore, gate: AccessGate, calculator: ExpirationCalculator
    ) -> None:
        self._store = store
        self._gate = gate
        self._calculator = calculator

    async def execute(
        self, domain: str, context: AccessContext, now: datetime | date | None = None
    ) -> DomainEntry:
        """
        Fetch one record.

        Raises:
            AuthorizationError: If the context may not read.
            ValidationError: If the domain name is malformed.
            RecordNotFoundError: If the domain is not tracked.
        """
        self._gate.require_read(context)
        key = normalize_domain(domain)

        record = await self._store.get(key)
        if record is None:
            msg = f"Domain {key} is not tracked"
            raise RecordNotFoundError(msg)

        return DomainEntry(
            record=record,
            status=self._calculator.compute_status(record, now or datetime.now(UTC)),
        )
