"""Checker protocol for pluggable credential verification."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Checker(Protocol):
    """Protocol for credential sources.

    Implementations decide whether a username/password pair is valid.
    Invalid credentials are a normal ``False`` result, not an error.
    """

    def check(self, username: str, password: str) -> bool:
        """Return True if and only if the username/password pair is valid.

        Args:
            username: Presented username, possibly empty.
            password: Presented password, possibly empty.
        """
        ...
