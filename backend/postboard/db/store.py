"""JSON file storage for the users and posts collections."""
from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import Any, Iterator

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class StorageError(RuntimeError):
    """Raised when a collection file cannot be parsed."""


class JsonCollection:
    """A collection of records stored as one JSON array in one file.

    Every read parses the whole file and every write replaces it. Mutations
    must go through ``update`` so concurrent read-modify-write cycles on the
    same collection are serialized.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self.path.stem

    def read(self) -> list[Record]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Collection {self.name!r} is not valid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise StorageError(f"Collection {self.name!r} must contain a JSON array")
        return records

    def write(self, records: list[Record]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.name}-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(records, handle, indent=2, default=str)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @contextmanager
    def update(self) -> Iterator[list[Record]]:
        """Lock the collection and yield its records for in-place mutation.

        The records are written back when the block exits normally.
        """

        with self._lock:
            records = self.read()
            yield records
            self.write(records)


class JsonStore:
    """The data directory holding every collection."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self.users = JsonCollection(self.data_dir / "users.json")
        self.posts = JsonCollection(self.data_dir / "posts.json")

    def initialize(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for collection in (self.users, self.posts):
            if not collection.path.exists():
                collection.write([])
                logger.info("Created empty %s collection at %s", collection.name, collection.path)


def next_id(records: list[Record]) -> int:
    """Return a creation-time id in epoch milliseconds, unique within ``records``."""

    candidate = int(time.time() * 1000)
    highest = max((record.get("id", 0) for record in records), default=0)
    return max(candidate, highest + 1)
