"""
Name formatting helpers.

`title_case` mirrors the classic `/\\w\\S*/g` replacement: every run that starts
with an ASCII word character and extends up to the next whitespace gets its
first character uppercased and the remainder lowercased. Characters outside
those runs are left untouched, so non-ASCII leading letters are not treated
as word starts (`"élodie"` -> `"éLodie"`).
"""

from __future__ import annotations

import re

_WORD_TOKEN = re.compile(r"\w\S*", re.ASCII)


def _capitalize_token(match: re.Match[str]) -> str:
    token = match.group(0)
    return token[0].upper() + token[1:].lower()


def title_case(text: str) -> str:
    """Title-case each whitespace-delimited token of `text`."""
    return _WORD_TOKEN.sub(_capitalize_token, text)


def full_name(first: str, last: str) -> str:
    """Join first and last name with a single space and title-case the result."""
    return title_case(f"{first} {last}")


__all__ = ["title_case", "full_name"]
