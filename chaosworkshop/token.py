"""Login tokens kept in an SQLite database."""

import sqlite3
import time
from collections.abc import Callable
from dataclasses import dataclass

from chaosworkshop.database import execute, fetch_rows
from chaosworkshop.datafiles import get_data_root

TOKENS_DATABASE = "data/tokens.db"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS tokens("
    "token TEXT PRIMARY KEY NOT NULL,"
    "id TEXT NOT NULL,"
    "creationtime INT NOT NULL)"
)


def open_database(path: str | None = None) -> sqlite3.Connection:
    """Open the tokens database in autocommit mode, creating its table."""
    if path is None:
        path = get_data_root() + TOKENS_DATABASE
    connection = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
    connection.execute(_CREATE_TABLE)
    return connection


@dataclass
class TokenStore:
    """Maps tokens to the ids of the users they belong to."""

    connection: sqlite3.Connection
    clock: Callable[[], float] = time.time

    def get_token_user(self, token: str) -> str:
        """Return the user id owning ``token``, or an empty string."""
        rows = fetch_rows(
            self.connection, "SELECT id FROM tokens WHERE token=@token", {"@token": token}
        )
        return rows[0]["id"] if rows else ""

    def add_user_token(self, user_id: str, token: str) -> bool:
        """Store ``token`` for ``user_id`` with the current time."""
        changed = execute(
            self.connection,
            "INSERT INTO tokens (token, id, creationtime) VALUES (@token, @id, @creationtime)",
            {"@token": token, "@id": user_id, "@creationtime": int(self.clock())},
        )
        return changed > 0

    def does_token_exist(self, token: str) -> bool:
        """Return whether ``token`` is stored."""
        rows = fetch_rows(
            self.connection, "SELECT 1 FROM tokens WHERE token=@token", {"@token": token}
        )
        return bool(rows)

    def get_user_tokens(self, user_id: str) -> list[str]:
        """Return the user's tokens, oldest first."""
        rows = fetch_rows(
            self.connection,
            "SELECT token FROM tokens WHERE id=@id ORDER BY creationtime",
            {"@id": user_id},
        )
        return [row["token"] for row in rows]

    def erase_token(self, token: str) -> bool:
        """Delete ``token``; return whether it existed."""
        changed = execute(
            self.connection, "DELETE FROM tokens WHERE token=@token", {"@token": token}
        )
        return changed > 0

    def erase_all_user_tokens(self, user_id: str) -> bool:
        """Delete every token of ``user_id``; return whether any existed."""
        changed = execute(
            self.connection, "DELETE FROM tokens WHERE id=@user_id", {"@user_id": user_id}
        )
        return changed > 0