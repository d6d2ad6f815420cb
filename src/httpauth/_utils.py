"""Internal utility functions for httpauth."""

from __future__ import annotations

from collections.abc import Iterable


def parse_credentials(entries: Iterable[str]) -> dict[str, str]:
    """Parse ``USER:PASSWORD`` entries into a username → password dict.

    The split happens at the first colon, so passwords may contain colons.
    Later entries for the same user win.
    """
    result: dict[str, str] = {}
    for entry in entries:
        username, sep, password = entry.partition(":")
        if not sep:
            raise ValueError(f"Credential entry must be USER:PASSWORD, got {entry!r}")
        if not username:
            raise ValueError("Credential entry has an empty username")
        result[username] = password
    return result


def split_env_credentials(value: str) -> list[str]:
    """Split a comma-separated credentials variable, skipping blank items.

    Entries are kept verbatim, so spaces around a password are significant.
    """
    return [item for item in value.split(",") if item.strip()]
