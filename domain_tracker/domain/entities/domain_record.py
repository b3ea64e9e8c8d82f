"""Domain record entity - one entry per tracked domain."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Self

from ..exceptions import ValidationError
from ..value_objects import format_record_date, normalize_domain, parse_record_date


@dataclass(frozen=True, slots=True)
class DomainRecord:
    """A tracked domain and its registration lifecycle dates."""

    domain: str
    system: str
    registrar: str | None = None
    registration_date: date | None = None
    expiration_date: date | None = None

    def __post_init__(self) -> None:
        """Enforce record invariants."""
        if not self.domain:
            raise ValidationError("domain", "domain name is required")
        if (
            self.registration_date is not None
            and self.expiration_date is not None
            and self.expiration_date < self.registration_date
        ):
            msg = (
                f"expiration date {self.expiration_date} is before "
                f"registration date {self.registration_date}"
            )
            raise ValidationError("expirationDate", msg)

    @property
    def has_unknown_dates(self) -> bool:
        """Check if either lifecycle date is the Unknown sentinel."""
        return self.registration_date is None or self.expiration_date is None

    def with_registration(
        self,
        *,
        registrar: str | None = None,
        registration_date: date | None = None,
        expiration_date: date | None = None,
        only_unknown: bool = False,
    ) -> Self:
        """
        Return a copy with registration data applied.

        ``None`` arguments never clear an existing value. With ``only_unknown``
        set, fields that are already known are left untouched.
        """
        changes: dict[str, Any] = {}
        if registrar and not (only_unknown and self.registrar):
            changes["registrar"] = registrar
        if registration_date and not (only_unknown and self.registration_date):
            changes["registration_date"] = registration_date
        if expiration_date and not (only_unknown and self.expiration_date):
            changes["expiration_date"] = expiration_date
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, str | None]:
        """Persisted representation."""
        return {
            "domain": self.domain,
            "system": self.system,
            "registrar": self.registrar,
            "registrationDate": format_record_date(self.registration_date),
            "expirationDate": format_record_date(self.expiration_date),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Rebuild a record from its persisted representation."""
        return cls.create(
            domain=data.get("domain", ""),
            system=data.get("system", ""),
            registrar=data.get("registrar"),
            registration_date=data.get("registrationDate"),
            expiration_date=data.get("expirationDate"),
        )

    @classmethod
    def create(
        cls,
        *,
        domain: str,
        system: str,
        registrar: str | None = None,
        registration_date: object = None,
        expiration_date: object = None,
    ) -> Self:
        """Factory method to create a DomainRecord from raw data."""
        return cls(
            domain=normalize_domain(domain),
            system=system,
            registrar=(registrar.strip() or None) if registrar else None,
            registration_date=parse_record_date(registration_date, "registrationDate"),
            expiration_date=parse_record_date(expiration_date, "expirationDate"),
        )
