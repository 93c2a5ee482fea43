"""Compressed, cached listing of all submissions."""

import json
import sqlite3
import threading
from dataclasses import dataclass

import zstandard

from chaosworkshop.database import fetch_rows
from chaosworkshop.util import sha256

COMPRESSION_LEVEL = 10


@dataclass(frozen=True)
class CompressedSubmissions:
    """The zstd-compressed submissions JSON and its SHA-256."""

    compressed_submissions: bytes
    sha256: str


class SubmissionsCache:
    """Builds the submissions listing lazily and keeps it until invalidated."""

    def __init__(self, connection: sqlite3.Connection, level: int = COMPRESSION_LEVEL) -> None:
        self._connection = connection
        self._compressor = zstandard.ZstdCompressor(level=level)
        self._lock = threading.Lock()
        self._cached: CompressedSubmissions | None = None

    def fetch_compressed_submissions(self) -> CompressedSubmissions:
        """Return the cached listing, building it first if needed."""
        with self._lock:
            if self._cached is None:
                self._cached = self._build()
            return self._cached

    def invalidate(self) -> None:
        """Drop the cached listing so the next fetch rebuilds it."""
        with self._lock:
            self._cached = None

    def _build(self) -> CompressedSubmissions:
        submissions = {}
        for row in fetch_rows(self._connection, "SELECT * FROM submissions"):
            columns = iter(row.items())
            _, submission_id = next(columns)
            submissions[str(submission_id)] = dict(columns)
        text = json.dumps(
            {"submissions": submissions},
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
        compressed = self._compressor.compress(text.encode("utf-8"))
        return CompressedSubmissions(compressed_submissions=compressed, sha256=sha256(compressed))