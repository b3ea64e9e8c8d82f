"""Categorized view of the record set."""

from dataclasses import dataclass

from .domain_record import DomainRecord


@dataclass(frozen=True, slots=True)
class CategorizedView:
    """Records split into provider-managed and second-level/custom buckets."""

    top_level: tuple[DomainRecord, ...] = ()
    second_level_and_custom: tuple[DomainRecord, ...] = ()

    @property
    def total_count(self) -> int:
        """Total number of records across both buckets."""
        return len(self.top_level) + len(self.second_level_and_custom)
