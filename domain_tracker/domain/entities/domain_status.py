"""Derived expiration status of a domain record."""

from dataclasses import dataclass

from ..value_objects import Severity

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class DomainStatus:
    """Remaining days, lifespan and progress computed for one record."""

    remaining_days: int | None
    total_days: int | None
    progress_percent: float
    severity: Severity

    @property
    def is_known(self) -> bool:
        """Check if the status was computed from two known dates."""
        return self.remaining_days is not None and self.total_days is not None

    @property
    def remaining_days_display(self) -> int | str:
        """Remaining days, or ``N/A`` when unknown."""
        return self.remaining_days if self.remaining_days is not None else NOT_AVAILABLE

    @property
    def total_days_display(self) -> int | str:
        """Total lifespan in days, or ``N/A`` when unknown."""
        return self.total_days if self.total_days is not None else NOT_AVAILABLE
