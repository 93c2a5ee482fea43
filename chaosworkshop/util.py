"""String helpers, hashing and random identifiers."""

import hashlib
import secrets
import string
import unicodedata

_RANDOM_CHARSET = string.digits + string.ascii_lowercase
_RANDOM_LENGTH = 16
_BRAILLE_BLANK = "\u2800"


def string_trim(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip()


def string_sanitize(text: str) -> str:
    """Cut ``text`` at its first unassigned code point and drop braille blanks."""
    for index, char in enumerate(text):
        if unicodedata.category(char) == "Cn":
            text = text[:index]
            break
    return text.replace(_BRAILLE_BLANK, "")


def string_split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, leaving out empty parts.

    A part starts at the first character that is not one of the delimiter's
    characters and runs up to the next whole occurrence of the delimiter.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    delimiter_chars = set(delimiter)
    parts: list[str] = []
    head = 0
    while True:
        start = next(
            (i for i in range(head, len(text)) if text[i] not in delimiter_chars),
            None,
        )
        if start is None:
            break
        end = text.find(delimiter, start)
        if end == -1:
            parts.append(text[start:])
            break
        parts.append(text[start:end])
        head = end
    return parts


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def sha256(data: str | bytes) -> str:
    """Return the lowercase hex SHA-256 digest of ``data``."""
    return hashlib.sha256(_as_bytes(data)).hexdigest()


def sha512(data: str | bytes) -> str:
    """Return the lowercase hex SHA-512 digest of ``data``."""
    return hashlib.sha512(_as_bytes(data)).hexdigest()


def generate_random_string() -> str:
    """Return 16 random characters drawn from digits and lowercase letters."""
    return "".join(secrets.choice(_RANDOM_CHARSET) for _ in range(_RANDOM_LENGTH))