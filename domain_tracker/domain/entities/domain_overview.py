"""Domain overview aggregate handed to the renderer."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..value_objects import AccessContext, Severity
from .domain_record import DomainRecord
from .domain_status import DomainStatus


@dataclass(frozen=True, slots=True)
class DomainEntry:
    """A record paired with its derived status."""

    record: DomainRecord
    status: DomainStatus


@dataclass(slots=True)
class DomainOverview:
    """Aggregate root representing one categorized read of the record set."""

    top_level: list[DomainEntry]
    second_level_and_custom: list[DomainEntry]
    access: AccessContext
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def entries(self) -> list[DomainEntry]:
        """All entries, top-level first."""
        return self.top_level + self.second_level_and_custom

    @property
    def total_count(self) -> int:
        """Total domain count."""
        return len(self.top_level) + len(self.second_level_and_custom)

    @property
    def is_admin_view(self) -> bool:
        """Check if this overview was produced for an administrator."""
        return self.access.can_mutate

    def count(self, severity: Severity) -> int:
        """Count entries with the given severity."""
        return sum(1 for entry in self.entries if entry.status.severity is severity)

    def get_counts(self) -> dict[str, int]:
        """Entry counts keyed by severity value."""
        return {severity.value: self.count(severity) for severity in Severity}

    def get_entries_sorted_by_urgency(self) -> list[DomainEntry]:
        """All entries sorted by urgency (most urgent first, unknown last)."""
        return sorted(
            self.entries,
            key=lambda e: (e.status.severity.rank, e.status.remaining_days or 0),
        )

    def get_summary(self) -> str:
        """Generate a human-readable summary of the overview."""
        parts: list[str] = []
        for severity in (Severity.EXPIRED, Severity.CRITICAL, Severity.WARNING):
            if count := self.count(severity):
                parts.append(f"{count} {severity.value}")

        if not parts:
            return "All domains are healthy"

        total_attention = sum(self.count(s) for s in Severity if s.requires_attention)
        return f"{total_attention} domains requiring attention: {', '.join(parts)}"
