"""Port for the record store - driven/secondary port."""

from __future__ import annotations

from typing import Protocol

from ...domain.entities import DomainRecord


class RecordStore(Protocol):
    """
    Port for durable storage of domain records, keyed by normalized domain.

    Each operation is atomic for its key; there are no cross-key transactions
    and concurrent writes to one key resolve by last-write-wins.
    """

    async def get(self, domain: str) -> DomainRecord | None:
        """
        Retrieve one record.

        Returns:
            The record, or None if the domain is not tracked.

        Raises:
            StoreUnavailableError: If the store cannot be read.
        """
        ...

    async def list(self) -> list[DomainRecord]:
        """
        Retrieve all records. Order carries no meaning.

        Raises:
            StoreUnavailableError: If the store cannot be read.
        """
        ...

    async def put(self, record: DomainRecord) -> None:
        """
        Insert or replace the record under its domain.

        Raises:
            StoreUnavailableError: If the store cannot be written.
        """
        ...

    async def delete(self, domain: str) -> None:
        """
        Remove a record. Deleting an absent domain is not an error.

        Raises:
            StoreUnavailableError: If the store cannot be written.
        """
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        ...
