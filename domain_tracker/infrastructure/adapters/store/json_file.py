"""Record store persisting one JSON document per domain."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from ....application.exceptions import StoreUnavailableError
from ....domain.entities import DomainRecord
from ....domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class JsonFileRecordStore:
    """
    Record store keeping each record in ``<directory>/<domain>.json``.

    Implements the RecordStore port. Writes go to a temporary file that is
    moved over the target with ``os.replace``, so a put or delete on one key
    is all-or-nothing even across processes sharing the directory.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path) -> None:
        """
        Initialize the store.

        Args:
            directory: Directory holding the record files; created on first write.
        """
        self._directory = directory

    async def get(self, domain: str) -> DomainRecord | None:
        return await self._run(self._read, self._path_for(domain))

    async def list(self) -> list[DomainRecord]:
        return await self._run(self._read_all)

    async def put(self, record: DomainRecord) -> None:
        await self._run(self._write, record)

    async def delete(self, domain: str) -> None:
        await self._run(self._remove, self._path_for(domain))

    async def close(self) -> None:
        pass

    async def _run(self, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except StoreUnavailableError:
            raise
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            msg = f"Record store at {self._directory} failed: {e}"
            logger.exception(msg)
            raise StoreUnavailableError(msg) from e

    def _path_for(self, domain: str) -> Path:
        if not domain or "/" in domain or "\\" in domain or domain.startswith("."):
            msg = f"Invalid record key {domain!r}"
            raise StoreUnavailableError(msg)
        return self._directory / f"{domain}{self.SUFFIX}"

    def _read(self, path: Path) -> DomainRecord | None:
        try:
            with open(path, encoding="utf-8") as f:
                return DomainRecord.from_dict(json.load(f))
        except FileNotFoundError:
            return None

    def _read_all(self) -> list[DomainRecord]:
        if not self._directory.exists():
            return []
        records: list[DomainRecord] = []
        for path in sorted(self._directory.glob(f"*{self.SUFFIX}")):
            record = self._read(path)
            if record is not None:
                records.append(record)
        return records

    def _write(self, record: DomainRecord) -> None:
        target = self._path_for(record.domain)
        self._directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record.to_dict(), f, indent=2, sort_keys=True)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _remove(self, path: Path) -> None:
        path.unlink(missing_ok=True)
