"""Access to files below the data root directory."""

import json
import os
from typing import Any

DATA_ROOT_ENV = "DATA_ROOT"


def get_data_root() -> str:
    """Return the data root with a trailing slash, or an empty string if unset."""
    root = os.environ.get(DATA_ROOT_ENV)
    if root is None:
        return ""
    return root + "/"


def resolve_path(filename: str) -> str:
    """Prefix ``filename`` with the data root unless it already contains it."""
    root = get_data_root()
    if root in filename:
        return filename
    return root + filename


def does_file_exist(filename: str) -> bool:
    """Return whether ``filename`` exists below the data root."""
    return os.path.exists(resolve_path(filename))


def read_file(filename: str) -> bytes:
    """Return the contents of ``filename``, or empty bytes if it does not exist."""
    path = resolve_path(filename)
    if not os.path.exists(path):
        return b""
    with open(path, "rb") as handle:
        return handle.read()


def read_json_file(filename: str) -> Any:
    """Parse ``filename`` as JSON; return None if it is missing or invalid."""
    content = read_file(filename)
    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def write_file(filename: str, content: str | bytes) -> None:
    """Write ``content`` to ``filename``, replacing what was there."""
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    with open(resolve_path(filename), "wb") as handle:
        handle.write(data)