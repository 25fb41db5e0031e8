"""Name normalization used for every identity and availability lookup."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def make_name_key(name: str | None) -> str:
    """Trim, lowercase and collapse whitespace runs to one space.

    ``"  Whole   MILK "`` and ``"whole milk"`` share the key ``"whole milk"``.
    Empty or missing names give ``""``.
    """
    if not name:
        return ""
    return _WHITESPACE_RUN.sub(" ", name.strip().lower())


def clean_text(value: str | None) -> str | None:
    """Trim an optional display value, treating blank strings as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None
