"""Line-oriented flat-file store."""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Iterable, Optional, TypeVar

from tallybook.database.codec import LineCodec
from tallybook.domain.errors import FormatError, StorageIOError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENCODING = "utf-8"


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of reading a flat file.

    ``skipped`` counts lines that could not be decoded; ``error`` is set when
    the file itself could not be read.
    """

    records: tuple[T, ...]
    skipped: int = 0
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "failed"
        if self.skipped:
            return "partial"
        return "ok"

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class FlatFileStore(Generic[T]):
    """Durable storage of an ordered sequence of items in one text file.

    Each item is stored as one line produced by ``codec``. The whole file is
    rewritten on every ``write_all``. There is no locking: the store assumes
    a single writer in a single process.
    """

    def __init__(self, path: str | Path, codec: LineCodec[T]):
        """Initialize the store, creating the file and its directory if needed.

        Args:
            path: Path of the backing text file
            codec: Codec used to encode and decode lines

        Raises:
            StorageIOError: If the directory or the file cannot be created
        """
        self.path = Path(path)
        self.codec = codec
        self._ensure_file()

    def _ensure_file(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.touch()
                logger.info("Created data file %s", self.path)
        except OSError as e:
            raise StorageIOError(f"Could not create data file {self.path}: {e}") from e

    def load(self) -> LoadResult[T]:
        """Read every non-blank line, skipping lines that fail to decode.

        Lines are decoded one at a time, so a line that is not valid UTF-8
        is skipped like any other malformed line.
        """
        items: list[T] = []
        skipped = 0
        try:
            with self.path.open("rb") as f:
                for line_number, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode(ENCODING).rstrip("\r\n")
                        if not line.strip():
                            continue
                        items.append(self.codec.from_line(line))
                    except (UnicodeDecodeError, FormatError) as e:
                        skipped += 1
                        logger.warning("Skipping line %d of %s: %s", line_number, self.path, e)
        except OSError as e:
            logger.error("Could not read data file %s: %s", self.path, e)
            return LoadResult(records=tuple(items), skipped=skipped, error=str(e))

        return LoadResult(records=tuple(items), skipped=skipped)

    def read_all(self) -> list[T]:
        """Return all decodable items in file order. Never raises."""
        return list(self.load().records)

    def write_all(self, items: Iterable[T]) -> None:
        """Replace the file contents with ``items`` in the given order.

        The new contents are written to a temporary file in the same
        directory and moved over the old file, so an interrupted write leaves
        the previous contents in place.

        Raises:
            StorageIOError: If the file cannot be written
        """
        lines = [self.codec.to_line(item) + "\n" for item in items]
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding=ENCODING, newline="\n") as f:
                f.writelines(lines)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(f"Could not write data file {self.path}: {e}") from e
