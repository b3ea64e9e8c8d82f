"""Use case for administrator create, update and delete actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ...domain.entities import DomainRecord
from ...domain.exceptions import ValidationError
from ...domain.services import AccessGate
from ...domain.value_objects import AccessContext, normalize_domain, parse_record_date
from ..ports import RecordStore, RegistrationLookup
from .sync_domains import apply_registration

logger = logging.getLogger(__name__)


class MutationAction(StrEnum):
    """Actions accepted by the mutation endpoint."""

    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class MutationRequest:
    """A single mutation as submitted by the caller."""

    action: str
    domain: str
    registrar: str | None = None
    registration_date: str | None = None
    expiration_date: str | None = None
    system: str | None = None


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of an applied mutation."""

    action: MutationAction
    domain: str
    record: DomainRecord | None
    lookup_attempted: bool = False
    created: bool = False


class MutateDomain:
    """
    Applies an administrator's update or delete to the record store.

    Authorization and validation both happen before any store call, so a
    rejected request never changes stored state.
    """

    def __init__(
        self,
        store: RecordStore,
        lookup: RegistrationLookup,
        gate: AccessGate,
        *,
        custom_tag: str,
    ) -> None:
        """
        Initialize the use case.

        Args:
            store: Record store adapter.
            lookup: Registration lookup used to fill missing dates.
            gate: Access gate for authorization checks.
            custom_tag: Provenance tag for manually entered domains.
        """
        self._store = store
        self._lookup = lookup
        self._gate = gate
        self._custom_tag = custom_tag

    async def execute(self, request: MutationRequest, context: AccessContext) -> MutationResult:
        """
        Execute the mutation.

        Raises:
            AuthorizationError: If the context is not an administrator.
            ValidationError: If the request is malformed.
            StoreUnavailableError: If the store fails.
        """
        self._gate.require_admin(context)
        action = _parse_action(request.action)
        domain = normalize_domain(request.domain)

        if action is MutationAction.DELETE:
            await self._store.delete(domain)
            logger.info("Deleted domain %s", domain)
            return MutationResult(action=action, domain=domain, record=None)

        return await self._update(domain, request)

    async def _update(self, domain: str, request: MutationRequest) -> MutationResult:
        registration_date = parse_record_date(request.registration_date, "registrationDate")
        expiration_date = parse_record_date(request.expiration_date, "expirationDate")

        existing = await self._store.get(domain)
        record = DomainRecord(
            domain=domain,
            system=_pick(request.system, existing.system if existing else None) or self._custom_tag,
            registrar=_pick(request.registrar, existing.registrar if existing else None),
            registration_date=(
                registration_date
                if request.registration_date is not None
                else (existing.registration_date if existing else None)
            ),
            expiration_date=(
                expiration_date
                if request.expiration_date is not None
                else (existing.expiration_date if existing else None)
            ),
        )

        lookup_attempted = False
        if record.has_unknown_dates and self._lookup.is_configured():
            lookup_attempted = True
            data = await self._lookup.lookup(domain)
            if data.is_known:
                record = apply_registration(record, data, only_unknown=True)
            else:
                logger.warning("Registration lookup failed for %s; keeping Unknown dates", domain)

        await self._store.put(record)
        logger.info("%s domain %s", "Updated" if existing else "Created", domain)

        return MutationResult(
            action=MutationAction.UPDATE,
            domain=domain,
            record=record,
            lookup_attempted=lookup_attempted,
            created=existing is None,
        )


def _parse_action(raw: str) -> MutationAction:
    try:
        return MutationAction((raw or "").strip().lower())
    except ValueError as e:
        msg = f"unsupported action {raw!r}, expected 'update' or 'delete'"
        raise ValidationError("action", msg) from e


def _pick(submitted: str | None, current: str | None) -> str | None:
    """Submitted text wins unless it was omitted; blank text clears the field."""
    if submitted is None:
        return current
    return submitted.strip() or None

