"""Built-in ``Checker`` implementations."""

from __future__ import annotations

import secrets
from collections.abc import Mapping

from httpauth.auth.protocol import Checker


class StaticCredentials:
    """Checks credentials against an in-memory username → password mapping.

    The mapping is held by reference, so changes made by its owner are seen
    by the next ``check``. ``None`` behaves like an empty mapping.

    Args:
        credentials: Usernames mapped to their passwords.
    """

    def __init__(self, credentials: Mapping[str, str] | None) -> None:
        self._credentials = credentials

    def check(self, username: str, password: str) -> bool:
        if not self._credentials:
            return False
        expected = self._credentials.get(username)
        if expected is None:
            return False
        return secrets.compare_digest(
            expected.encode("utf-8", "surrogatepass"),
            password.encode("utf-8", "surrogatepass"),
        )


class AllowAll:
    """Accepts every username/password pair, including empty ones."""

    def check(self, username: str, password: str) -> bool:
        return True


# Verify protocol compliance at import time
assert isinstance(StaticCredentials(None), Checker)
assert isinstance(AllowAll(), Checker)
