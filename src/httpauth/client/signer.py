"""Signer protocol and implementations for outbound requests."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from httpauth.auth.basic import encode_basic_auth


@runtime_checkable
class Signer(Protocol):
    """Protocol for objects that attach credentials to outbound requests.

    Implementations modify ``request`` in place and raise (conventionally
    ``SigningError``) when credentials cannot be attached.
    """

    def sign(self, request: httpx.Request) -> None: ...


@dataclass(frozen=True)
class BasicAuthSigner:
    """Signs requests with a Basic ``Authorization`` header.

    Attributes:
        username: Username sent with every request.
        password: Password sent with every request.
    """

    username: str
    password: str

    def sign(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = encode_basic_auth(self.username, self.password)


class SignerAuth(httpx.Auth):
    """Adapts a ``Signer`` to httpx's ``auth=`` hook."""

    def __init__(self, signer: Signer) -> None:
        self._signer = signer

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        self._signer.sign(request)
        yield request


# Verify protocol compliance at import time
assert isinstance(BasicAuthSigner("", ""), Signer)
