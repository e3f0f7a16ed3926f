"""Small string utilities shared across the shell."""

from __future__ import annotations


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim`` the way line-by-line field reading does.

    Empty fields between delimiters are kept, but a single trailing empty
    field (text ending with the delimiter, or empty text) is dropped.
    """
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts