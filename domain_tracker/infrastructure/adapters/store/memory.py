"""In-process record store."""

from __future__ import annotations

from ....domain.entities import DomainRecord


class InMemoryRecordStore:
    """
    Record store backed by a dict.

    Implements the RecordStore port. Contents last for the life of the
    process only.
    """

    def __init__(self, records: list[DomainRecord] | None = None) -> None:
        self._records: dict[str, DomainRecord] = {r.domain: r for r in records or []}

    async def get(self, domain: str) -> DomainRecord | None:
        return self._records.get(domain)

    async def list(self) -> list[DomainRecord]:
        return list(self._records.values())

    async def put(self, record: DomainRecord) -> None:
        self._records[record.domain] = record

    async def delete(self, domain: str) -> None:
        self._records.pop(domain, None)

    async def close(self) -> None:
        pass
