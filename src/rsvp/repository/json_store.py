"""RSVP store backed by a single human-readable JSON array on disk."""

import asyncio
import fcntl
import json
import logging
import os
import tempfile
from contextlib import contextmanager, suppress
from pathlib import Path

from pydantic import ValidationError

from src.rsvp.dtos import RSVPSubmission, StorageError, StoredRSVP
from src.rsvp.repository.base import RSVPStore, stamp_submission

logger = logging.getLogger(__name__)


class JsonFileRSVPStore(RSVPStore):
    """
    Appends rewrite the whole file under an exclusive lock.

    The asyncio lock orders appends inside one event loop, the flock on the
    sidecar ``.lock`` file orders them across threads and worker processes.
    Writes go to a temp file that is renamed over the target, so readers never
    see a half-written array.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.lock_path = self.path.with_name(self.path.name + ".lock")
        self._lock = asyncio.Lock()

    async def append(self, submission: RSVPSubmission) -> StoredRSVP:
        async with self._lock:
            return await asyncio.to_thread(self._append_locked, submission)

    async def list_all(self) -> list[StoredRSVP]:
        return await asyncio.to_thread(self._list_locked)

    @contextmanager
    def _file_lock(self, exclusive: bool):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.lock_path, "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH)
            try:
                yield
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def _append_locked(self, submission: RSVPSubmission) -> StoredRSVP:
        try:
            with self._file_lock(exclusive=True):
                records = self._read()
                previous = self._parse(records[-1]).submitted_at if records else None
                stored = stamp_submission(submission, previous)
                records.append(stored.to_json())
                self._write(records)
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

        logger.debug("Appended RSVP %s (%d total)", stored.id, len(records))
        return stored

    def _list_locked(self) -> list[StoredRSVP]:
        # Reading never creates the data directory or the lock file
        if not self.path.parent.is_dir():
            return []
        try:
            with self._file_lock(exclusive=False):
                records = self._read()
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        return [self._parse(record) for record in records]

    def _read(self) -> list[dict]:
        if not self.path.exists():
            return []

        content = self.path.read_text(encoding="utf-8").strip()
        if not content:
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON") from e
        if not isinstance(data, list):
            raise StorageError(f"{self.path} does not contain a JSON array")
        return data

    def _parse(self, record: dict) -> StoredRSVP:
        try:
            return StoredRSVP.model_validate(record)
        except ValidationError as e:
            raise StorageError(f"Malformed record in {self.path}") from e

    def _write(self, records: list[dict]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            with suppress(OSError):
                os.unlink(tmp_name)
            raise
