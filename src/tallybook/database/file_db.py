"""Flat-file implementation of the repository interface."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from tallybook.database.base import TransactionRepository
from tallybook.database.codec import RecordLineCodec
from tallybook.database.flatfile import FlatFileStore, LoadResult
from tallybook.domain.entities import Record
from tallybook.domain.errors import StorageIOError

logger = logging.getLogger(__name__)


class FileTransactionRepository(TransactionRepository):
    """Repository keeping records in one ``date;amount;description`` file.

    All records are loaded into memory at construction and every mutation
    rewrites the whole file. A record's identity is its index in
    ``find_all()``; deleting a record shifts the index of every later one.
    """

    def __init__(self, path: str | Path):
        """Initialize the repository and load the file.

        Args:
            path: Path to the data file (created if missing)
        """
        self.store: FlatFileStore[Record] = FlatFileStore(path, RecordLineCodec())
        self.last_load: LoadResult[Record] = self.store.load()
        self._records: list[Record] = list(self.last_load.records)

        if self._records:
            logger.info("Loaded %d records from %s", len(self._records), self.store.path)
        else:
            logger.info("No records found in %s", self.store.path)

    @property
    def path(self) -> Path:
        return self.store.path

    def _flush(self) -> bool:
        """Write the cache to disk. Returns False if nothing was written.

        The file is never written while the last load failed; ``reload``
        first.
        """
        if self.last_load.status == "failed":
            logger.error(
                "Not writing %s, it could not be read: %s", self.store.path, self.last_load.error
            )
            return False
        try:
            self.store.write_all(self._records)
        except StorageIOError as e:
            logger.error("Write abandoned, memory and disk may now differ: %s", e)
            return False
        return True

    def save(self, record: Record) -> Record:
        """Append a record and rewrite the file."""
        self._records.append(record)
        self._flush()
        return record

    def delete(self, identity: int) -> bool:
        """Delete the record at position ``identity``."""
        return self.delete_by_index(identity)

    def delete_by_index(self, index: int) -> bool:
        """Delete the record at ``index``. Returns False if out of range."""
        if 0 <= index < len(self._records):
            del self._records[index]
            self._flush()
            return True
        return False

    def find_all(self) -> list[Record]:
        """Return a copy of all records in file order."""
        return list(self._records)

    def find_by_date_range(self, start_date: date, end_date: date) -> list[Record]:
        return [r for r in self._records if start_date <= r.date <= end_date]

    def count(self) -> int:
        return len(self._records)

    def save_all(self, records: Iterable[Record]) -> bool:
        """Replace the cache and the file with ``records``.

        Returns:
            True if the file was rewritten, False otherwise
        """
        self._records = list(records)
        return self._flush()

    def reload(self) -> LoadResult[Record]:
        """Discard the cache and read the file again."""
        self.last_load = self.store.load()
        self._records = list(self.last_load.records)
        return self.last_load
