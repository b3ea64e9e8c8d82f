"""Domain service computing expiration progress and severity."""

import math
from datetime import UTC, date, datetime, time

from ..entities import DomainRecord, DomainStatus
from ..value_objects import ExpirationThresholds, Severity

SECONDS_PER_DAY = 86_400

UNKNOWN_STATUS = DomainStatus(
    remaining_days=None,
    total_days=None,
    progress_percent=0.0,
    severity=Severity.UNKNOWN,
)


class ExpirationCalculator:
    """Domain service deriving a DomainStatus from a record's two dates."""

    def __init__(self, thresholds: ExpirationThresholds | None = None) -> None:
        """Initialize calculator with thresholds."""
        self._thresholds = thresholds or ExpirationThresholds()

    @property
    def thresholds(self) -> ExpirationThresholds:
        return self._thresholds

    def compute_status(self, record: DomainRecord, now: datetime | date) -> DomainStatus:
        """
        Compute remaining days, lifespan, progress and severity.

        Dates are taken as midnight UTC. Records with an Unknown date, or with
        a zero-length lifespan, get the unknown status.

        Args:
            record: The record to evaluate.
            now: Reference time; naive datetimes are treated as UTC.

        Returns:
            DomainStatus for the record.
        """
        if record.registration_date is None or record.expiration_date is None:
            return UNKNOWN_STATUS

        expires_at = _start_of_day(record.expiration_date)
        registered_at = _start_of_day(record.registration_date)

        total_days = _ceil_days((expires_at - registered_at).total_seconds())
        if total_days <= 0:
            return UNKNOWN_STATUS

        remaining_days = _ceil_days((expires_at - _as_utc(now)).total_seconds())
        progress = 100 - remaining_days / total_days * 100

        return DomainStatus(
            remaining_days=remaining_days,
            total_days=total_days,
            progress_percent=round(min(max(progress, 0.0), 100.0), 2),
            severity=self.get_severity(remaining_days),
        )

    def get_severity(self, remaining_days: int | None) -> Severity:
        """Determine severity based on thresholds."""
        if remaining_days is None:
            return Severity.UNKNOWN
        if remaining_days < 0:
            return Severity.EXPIRED
        if remaining_days < self._thresholds.critical:
            return Severity.CRITICAL
        if remaining_days < self._thresholds.warning:
            return Severity.WARNING
        return Severity.HEALTHY


def compute_status(
    record: DomainRecord,
    now: datetime | date,
    thresholds: ExpirationThresholds | None = None,
) -> DomainStatus:
    """Compute a record's status with the given (or default) thresholds."""
    return ExpirationCalculator(thresholds).compute_status(record, now)


def _ceil_days(seconds: float) -> int:
    return math.ceil(seconds / SECONDS_PER_DAY)


def _start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=UTC)


def _as_utc(now: datetime | date) -> datetime:
    if not isinstance(now, datetime):
        return _start_of_day(now)
    return now.astimezone(UTC) if now.tzinfo else now.replace(tzinfo=UTC)
