"""Domain service splitting records into display buckets."""

from collections.abc import Iterable

from ..entities import CategorizedView, DomainRecord


def is_top_level(record: DomainRecord, provider_tag: str) -> bool:
    """Check if a record is managed through the DNS provider account."""
    return record.system.casefold() == provider_tag.casefold()


def classify(records: Iterable[DomainRecord], provider_tag: str) -> CategorizedView:
    """
    Partition records into top-level and second-level/custom buckets.

    Every record lands in exactly one bucket and keeps its listing order.

    Args:
        records: Records in store listing order.
        provider_tag: Provenance tag of the managed DNS provider.

    Returns:
        CategorizedView with both buckets.
    """
    top_level: list[DomainRecord] = []
    others: list[DomainRecord] = []
    for record in records:
        (top_level if is_top_level(record, provider_tag) else others).append(record)

    return CategorizedView(top_level=tuple(top_level), second_level_and_custom=tuple(others))
