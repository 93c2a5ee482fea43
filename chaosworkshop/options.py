"""Server configuration read from the options file."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chaosworkshop.datafiles import read_json_file

OPTIONS_FILE = "data/options.json"
_MAX_PORT = 65535


class OptionsError(Exception):
    """Raised when the options file is missing or incomplete."""


# attribute, key, section, type
_FIELDS: tuple[tuple[str, str, str | None, type], ...] = (
    ("domain", "domain", None, str),
    ("port", "port", None, int),
    ("use_tls", "use_tls", None, bool),
    ("connection_timeout", "connection_timeout", None, int),
    ("webhook_url", "webhook_url", None, str),
    ("requestor_substitute_header", "requestor_substitute_header", None, str),
    ("user_min_name_length", "min_name_length", "user", int),
    ("user_max_name_length", "max_name_length", "user", int),
    ("user_max_password_length", "max_password_length", "user", int),
    ("user_max_submissions", "max_submissions", "user", int),
    ("user_max_active_tokens", "max_active_tokens", "user", int),
    ("user_time_between_registrations", "time_between_registrations", "user", int),
    ("submission_max_name_length", "max_name_length", "submission", int),
    ("submission_max_version_length", "max_version_length", "submission", int),
    ("submission_max_description_length", "max_description_length", "submission", int),
    ("submission_max_description_newlines", "max_description_newlines", "submission", int),
    ("submission_max_changelog_length", "max_changelog_length", "submission", int),
    ("submission_max_changelog_newlines", "max_changelog_newlines", "submission", int),
    ("submission_max_total_size", "max_total_size", "submission", int),
    ("submission_max_file_count", "max_file_count", "submission", int),
    ("submission_max_file_name_length", "max_file_name_length", "submission", int),
    ("submission_unpack_timeout", "unpack_timeout", "submission", int),
)


def _check(key: str, value: Any, kind: type) -> Any:
    if kind is bool:
        valid = isinstance(value, bool)
    elif kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool) and value >= 0
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise OptionsError(f"Invalid config option {key}")
    return value


@dataclass(frozen=True)
class Options:
    """All settings the server needs."""

    domain: str
    port: int
    use_tls: bool
    connection_timeout: int
    webhook_url: str
    requestor_substitute_header: str

    user_min_name_length: int
    user_max_name_length: int
    user_max_password_length: int
    user_max_submissions: int
    user_max_active_tokens: int
    user_time_between_registrations: int

    submission_max_name_length: int
    submission_max_version_length: int
    submission_max_description_length: int
    submission_max_description_newlines: int
    submission_max_changelog_length: int
    submission_max_changelog_newlines: int
    submission_max_total_size: int
    submission_max_file_count: int
    submission_max_file_name_length: int
    submission_unpack_timeout: int

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Options":
        """Build options from parsed JSON, raising OptionsError on a missing or bad key."""
        if not isinstance(data, Mapping):
            raise OptionsError("Options must be a JSON object")
        values: dict[str, Any] = {}
        for attribute, key, section, kind in _FIELDS:
            source = data if section is None else data.get(section)
            if not isinstance(source, Mapping) or key not in source:
                raise OptionsError(f"Missing config option {key}")
            values[attribute] = _check(key, source[key], kind)
        if values["port"] > _MAX_PORT:
            raise OptionsError("Invalid config option port")
        return cls(**values)


def load_options(filename: str = OPTIONS_FILE) -> Options:
    """Read options from ``filename`` below the data root."""
    data = read_json_file(filename)
    if not data:
        raise OptionsError(f"Missing or invalid {filename} file in DATA_ROOT path")
    return Options.from_mapping(data)