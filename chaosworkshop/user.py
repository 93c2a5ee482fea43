"""User accounts: the users database and per-user JSON files."""

import json
import os
import sqlite3
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chaosworkshop.database import fetch_rows
from chaosworkshop.datafiles import get_data_root, read_json_file, resolve_path, write_file

USERS_DATABASE = "data/users.db"
USER_DIR_FRAGMENT = "data/users/"
USER_FILE_FRAGMENT = "/user.json"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS users("
    "name TEXT PRIMARY KEY NOT NULL,"
    "id TEXT NOT NULL,"
    "password TEXT NOT NULL)"
)


def open_database(path: str | None = None) -> sqlite3.Connection:
    """Open the users database in autocommit mode, creating its table."""
    if path is None:
        path = get_data_root() + USERS_DATABASE
    connection = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
    connection.execute(_CREATE_TABLE)
    return connection


def _user_file(user_id: str) -> str:
    return USER_DIR_FRAGMENT + user_id + USER_FILE_FRAGMENT


@dataclass
class UserStore:
    """Looks up users and reads and writes their attribute files."""

    connection: sqlite3.Connection

    def _first(self, query: str, bindings: Mapping[str, Any]) -> str:
        rows = fetch_rows(self.connection, query, bindings)
        if not rows:
            return ""
        return next(iter(rows[0].values()))

    def does_user_id_exist(self, user_id: str) -> bool:
        """Return whether a user with ``user_id`` exists."""
        return bool(
            fetch_rows(self.connection, "SELECT 1 FROM users WHERE id=@id", {"@id": user_id})
        )

    def get_user_name(self, user_id: str) -> str:
        """Return the name of ``user_id``, or an empty string."""
        return self._first("SELECT name FROM users WHERE id=@id", {"@id": user_id})

    def does_user_name_exist(self, user_name: str) -> bool:
        """Return whether ``user_name`` is taken, ignoring case."""
        return bool(
            fetch_rows(
                self.connection,
                "SELECT 1 FROM users WHERE UPPER(name)=UPPER(@user_name)",
                {"@user_name": user_name},
            )
        )

    def get_user_id(self, user_name: str) -> str:
        """Return the id for ``user_name`` (ignoring case), or an empty string."""
        return self._first(
            "SELECT id FROM users WHERE UPPER(name)=UPPER(@user_name)",
            {"@user_name": user_name},
        )

    def get_user_json(self, user_id: str) -> dict[str, Any]:
        """Return the user's attributes; empty if the file is missing or invalid."""
        data = read_json_file(_user_file(user_id))
        return data if isinstance(data, dict) else {}

    def write_user_json(self, user_id: str, data: Mapping[str, Any]) -> None:
        """Replace the user's attribute file with ``data``."""
        path = _user_file(user_id)
        os.makedirs(os.path.dirname(resolve_path(path)), exist_ok=True)
        write_file(path, json.dumps(dict(data), indent=4, sort_keys=True, ensure_ascii=False))

    def get_user_attribute(self, user_id: str, attribute: str) -> Any:
        """Return one attribute, or None if it is not set."""
        return self.get_user_json(user_id).get(attribute)

    def contains_user_attribute(self, user_id: str, attribute: str) -> bool:
        """Return whether the attribute is set."""
        return attribute in self.get_user_json(user_id)

    def set_user_attribute(self, user_id: str, attribute: str, value: Any) -> None:
        """Set one attribute."""
        self.set_user_attributes(user_id, {attribute: value})

    def set_user_attributes(self, user_id: str, attributes: Mapping[str, Any]) -> None:
        """Set several attributes in one write."""
        data = self.get_user_json(user_id)
        data.update(attributes)
        self.write_user_json(user_id, data)

    def erase_user_attributes(self, user_id: str, *attributes: str) -> None:
        """Remove the named attributes; missing ones are ignored."""
        data = self.get_user_json(user_id)
        for attribute in attributes:
            data.pop(attribute, None)
        self.write_user_json(user_id, data)

    def is_user_admin(self, user_id: str) -> bool:
        """Return whether the user carries the admin attribute."""
        return self.contains_user_attribute(user_id, "is_admin")

    def can_user_modify_submission(self, user_id: str, submission_id: str) -> bool:
        """Return whether the user is an admin or owns the submission."""
        if self.is_user_admin(user_id):
            return True
        submissions = self.get_user_attribute(user_id, "submissions")
        return isinstance(submissions, (dict, list)) and submission_id in submissions