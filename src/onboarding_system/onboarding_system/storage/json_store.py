from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

from ..core.exceptions import DataParseError, StorageError

logger = logging.getLogger(__name__)

RawRecords = Dict[str, Dict[str, Any]]


class JsonRecordStore:
    """Whole-document JSON persistence for one entity type.

    The file holds a single JSON object whose keys are record identifiers.
    Every access reads the entire file, and every mutation rewrites it, while
    holding one in-process lock, so two writers never interleave a
    read-modify-write cycle on the same file.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @contextmanager
    def document(self, *, write: bool = True) -> Iterator[RawRecords]:
        """Yield the parsed records; rewrite the file when the block exits cleanly.

        An exception raised inside the block skips the write, leaving the file as it was.
        """
        with self._lock:
            records = self._read()
            yield records
            if write:
                self._write(records)

    def ensure_readable(self) -> int:
        """Parse the file once; used at startup, where any failure is fatal."""
        with self.document(write=False) as records:
            logger.info("Loaded %d records from %s", len(records), self._path)
            return len(records)

    def _read(self) -> RawRecords:
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise StorageError(f"Data file not found: {self._path}") from e
        except OSError as e:
            raise StorageError(f"Unable to read data file {self._path}: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise DataParseError(f"Malformed JSON in {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise DataParseError(f"Expected a JSON object at the top level of {self._path}")
        for key, value in data.items():
            if not isinstance(value, dict):
                raise DataParseError(f"Record {key!r} in {self._path} is not a JSON object")
        return data

    def _write(self, records: RawRecords) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Unable to write data file {self._path}: {e}") from e
        logger.debug("Wrote %d records to %s", len(records), self._path)
