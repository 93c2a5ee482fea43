"""Reading HTML files with placeholder substitution."""

from collections.abc import Iterable

from chaosworkshop.datafiles import read_file

DOMAIN_PLACEHOLDER = "$$domain$$"


def replace_all(text: str, to_find: str, replacement: str) -> str:
    """Replace ``to_find`` repeatedly until it no longer occurs in ``text``."""
    if not to_find:
        raise ValueError("search text must not be empty")
    if to_find in replacement:
        raise ValueError("replacement must not contain the search text")
    while (index := text.find(to_find)) != -1:
        text = text[:index] + replacement + text[index + len(to_find):]
    return text


def render_html_file(
    filename: str,
    domain: str,
    replacements: Iterable[tuple[str, str]] = (),
) -> str:
    """Read ``filename`` and fill in the domain and any extra placeholders.

    A missing file gives an empty string.
    """
    text = read_file(filename).decode("utf-8", errors="replace")
    text = replace_all(text, DOMAIN_PLACEHOLDER, domain)
    for to_find, replacement in replacements:
        text = replace_all(text, to_find, replacement)
    return text