import json

import pytest
import zstandard

from chaosworkshop.cache import SubmissionsCache
from chaosworkshop.database import execute
from chaosworkshop.submission import open_database
from chaosworkshop.util import sha256

_INSERT = (
    "INSERT INTO submissions (id, author, description, lastupdated, name, sha256, version) "
    "VALUES (@id, @author, @description, @lastupdated, @name, @sha256, @version)"
)


def _insert(connection, submission_id, name):
    execute(
        connection,
        _INSERT,
        {
            "@id": submission_id,
            "@author": "Alice",
            "@description": None,
            "@lastupdated": 5,
            "@name": name,
            "@sha256": "ff",
            "@version": "1.0",
        },
    )


def _decode(result):
    return json.loads(zstandard.ZstdDecompressor().decompress(result.compressed_submissions))


@pytest.fixture
def connection():
    connection = open_database(":memory:")
    yield connection
    connection.close()


def test_empty_database(connection):
    result = SubmissionsCache(connection).fetch_compressed_submissions()
    assert _decode(result) == {"submissions": {}}
    assert result.sha256 == sha256(result.compressed_submissions)


def test_rows_keyed_by_id(connection):
    _insert(connection, "aaaaaaaaaaaaaaaa", "First")
    result = SubmissionsCache(connection).fetch_compressed_submissions()
    assert _decode(result) == {
        "submissions": {
            "aaaaaaaaaaaaaaaa": {
                "author": "Alice",
                "description": None,
                "lastupdated": 5,
                "name": "First",
                "sha256": "ff",
                "version": "1.0",
            }
        }
    }


def test_cached_until_invalidated(connection):
    cache = SubmissionsCache(connection)
    first = cache.fetch_compressed_submissions()
    _insert(connection, "bbbbbbbbbbbbbbbb", "Second")
    assert cache.fetch_compressed_submissions() is first
    cache.invalidate()
    rebuilt = cache.fetch_compressed_submissions()
    assert list(_decode(rebuilt)["submissions"]) == ["bbbbbbbbbbbbbbbb"]
    assert rebuilt.sha256 == sha256(rebuilt.compressed_submissions)
    assert rebuilt.sha256 != first.sha256