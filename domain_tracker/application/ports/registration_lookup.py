"""Port for WHOIS-style registration lookups - driven/secondary port."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol, Self


@dataclass(frozen=True, slots=True)
class RegistrationData:
    """Registration facts returned by a lookup; None fields are unknown."""

    registration_date: date | None = None
    expiration_date: date | None = None
    registrar: str | None = None

    @property
    def is_known(self) -> bool:
        """Check if both dates were resolved."""
        return self.registration_date is not None and self.expiration_date is not None

    @classmethod
    def unknown(cls) -> Self:
        """Result used when a lookup fails."""
        return cls()


class RegistrationLookup(Protocol):
    """Port for fetching authoritative registration data for one domain."""

    async def lookup(self, domain: str) -> RegistrationData:
        """
        Look up registration and expiration dates.

        Never raises: any failure is downgraded to ``RegistrationData.unknown()``.
        """
        ...

    def is_configured(self) -> bool:
        """Check if this lookup can reach a service."""
        ...
