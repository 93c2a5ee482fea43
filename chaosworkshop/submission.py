"""Submission storage: database, id checks and changelog files."""

import json
import sqlite3
import string
from typing import Any

from chaosworkshop.datafiles import get_data_root, read_json_file, write_file

SUBMISSIONS_DATABASE = "data/submissions.db"
SUBMISSION_DIR_FRAGMENT = "data/submissions/"
SUBMISSION_DATA_FILE_FRAGMENT = "/data.zip"
SUBMISSION_DATA_FILE_COMPRESSED_FRAGMENT = "/data.zip.zst"
SUBMISSION_CHANGELOG_FILE_FRAGMENT = "/changelog.json"

SUBMISSION_ID_LENGTH = 16
_ID_CHARS = frozenset(string.ascii_lowercase + string.digits)

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS submissions("
    "id TEXT PRIMARY KEY NOT NULL,"
    "author TEXT NOT NULL,"
    "description TEXT,"
    "lastupdated INT NOT NULL,"
    "name TEXT NOT NULL,"
    "sha256 TEXT,"
    "version TEXT NOT NULL)"
)


def open_database(path: str | None = None) -> sqlite3.Connection:
    """Open the submissions database in autocommit mode, creating its table."""
    if path is None:
        path = get_data_root() + SUBMISSIONS_DATABASE
    connection = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
    connection.execute(_CREATE_TABLE)
    return connection


def is_valid_submission_id(submission_id: str) -> bool:
    """Return whether the id is 16 lowercase ASCII letters or digits."""
    return len(submission_id) == SUBMISSION_ID_LENGTH and set(submission_id) <= _ID_CHARS


def submission_dir(submission_id: str) -> str:
    """Return the submission's directory relative to the data root."""
    return SUBMISSION_DIR_FRAGMENT + submission_id


def _changelog_path(submission_id: str) -> str:
    return submission_dir(submission_id) + SUBMISSION_CHANGELOG_FILE_FRAGMENT


def get_changelog_json(submission_id: str) -> Any:
    """Return the submission's changelog, or None if missing or invalid."""
    return read_json_file(_changelog_path(submission_id))


def write_changelog_json(submission_id: str, data: Any) -> None:
    """Write the submission's changelog as indented JSON."""
    write_file(
        _changelog_path(submission_id),
        json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False),
    )