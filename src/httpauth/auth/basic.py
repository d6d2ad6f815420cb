"""Encoding and parsing of ``Authorization: Basic`` header values."""

from __future__ import annotations

import base64

_PREFIX = "basic "


def parse_basic_auth(header: str | None) -> tuple[str, str, bool]:
    """Extract credentials from a Basic ``Authorization`` header value.

    The scheme is matched case-insensitively and the payload must be strict
    standard base64 of UTF-8 ``username:password``. The pair is split at the
    first colon, so passwords may contain colons but usernames may not.

    Returns:
        ``(username, password, True)`` on success, ``("", "", False)`` for an
        absent or malformed header.
    """
    if not header or len(header) < len(_PREFIX) or header[: len(_PREFIX)].lower() != _PREFIX:
        return "", "", False

    try:
        decoded = base64.b64decode(header[len(_PREFIX) :].encode("ascii"), validate=True).decode("utf-8")
    except ValueError:
        return "", "", False

    username, sep, password = decoded.partition(":")
    if not sep:
        return "", "", False
    return username, password, True


def encode_basic_auth(username: str, password: str) -> str:
    """Build a Basic ``Authorization`` header value for the given credentials."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"
