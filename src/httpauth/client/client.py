"""Clients that sign every request before handing it to httpx."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import httpx

from httpauth.client.signer import Signer

logger = logging.getLogger(__name__)


class SigningClient:
    """Wraps an ``httpx.Client`` and signs each request before sending it.

    If the signer raises, the error propagates and nothing is sent.

    Args:
        client: The underlying httpx client.
        signer: A ``Signer`` implementation.
    """

    def __init__(self, client: httpx.Client, signer: Signer) -> None:
        self._client = client
        self._signer = signer

    @property
    def client(self) -> httpx.Client:
        return self._client

    @property
    def signer(self) -> Signer:
        return self._signer

    def send(self, request: httpx.Request) -> httpx.Response:
        """Sign ``request`` and send it with the wrapped client."""
        self._signer.sign(request)
        logger.debug("Sending signed %s %s", request.method, request.url)
        return self._client.send(request)

    def get(self, url: httpx.URL | str) -> httpx.Response:
        return self.send(self._client.build_request("GET", url))

    def head(self, url: httpx.URL | str) -> httpx.Response:
        return self.send(self._client.build_request("HEAD", url))

    def post(self, url: httpx.URL | str, content_type: str, content: Any) -> httpx.Response:
        """Send a POST with ``content`` as the body and the given content type."""
        request = self._client.build_request("POST", url, content=content, headers={"Content-Type": content_type})
        return self.send(request)

    def post_form(self, url: httpx.URL | str, data: Mapping[str, Any]) -> httpx.Response:
        """Send a POST with ``data`` encoded as ``application/x-www-form-urlencoded``."""
        return self.send(self._client.build_request("POST", url, data=data))


class AsyncSigningClient:
    """Async counterpart of ``SigningClient`` wrapping an ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient, signer: Signer) -> None:
        self._client = client
        self._signer = signer

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def signer(self) -> Signer:
        return self._signer

    async def send(self, request: httpx.Request) -> httpx.Response:
        self._signer.sign(request)
        logger.debug("Sending signed %s %s", request.method, request.url)
        return await self._client.send(request)

    async def get(self, url: httpx.URL | str) -> httpx.Response:
        return await self.send(self._client.build_request("GET", url))

    async def head(self, url: httpx.URL | str) -> httpx.Response:
        return await self.send(self._client.build_request("HEAD", url))

    async def post(self, url: httpx.URL | str, content_type: str, content: Any) -> httpx.Response:
        request = self._client.build_request("POST", url, content=content, headers={"Content-Type": content_type})
        return await self.send(request)

    async def post_form(self, url: httpx.URL | str, data: Mapping[str, Any]) -> httpx.Response:
        return await self.send(self._client.build_request("POST", url, data=data))


@contextmanager
def _signing_client(signer: Signer, client: httpx.Client | None) -> Iterator[SigningClient]:
    """Yield a ``SigningClient``, opening a default httpx client if none is given."""
    if client is not None:
        yield SigningClient(client, signer)
        return
    with httpx.Client() as default_client:
        yield SigningClient(default_client, signer)


def send(signer: Signer, request: httpx.Request, *, client: httpx.Client | None = None) -> httpx.Response:
    """Sign and send ``request``; a default client is used when ``client`` is None."""
    with _signing_client(signer, client) as c:
        return c.send(request)


def get(signer: Signer, url: httpx.URL | str, *, client: httpx.Client | None = None) -> httpx.Response:
    with _signing_client(signer, client) as c:
        return c.get(url)


def head(signer: Signer, url: httpx.URL | str, *, client: httpx.Client | None = None) -> httpx.Response:
    with _signing_client(signer, client) as c:
        return c.head(url)


def post(
    signer: Signer,
    url: httpx.URL | str,
    content_type: str,
    content: Any,
    *,
    client: httpx.Client | None = None,
) -> httpx.Response:
    with _signing_client(signer, client) as c:
        return c.post(url, content_type, content)


def post_form(
    signer: Signer,
    url: httpx.URL | str,
    data: Mapping[str, Any],
    *,
    client: httpx.Client | None = None,
) -> httpx.Response:
    with _signing_client(signer, client) as c:
        return c.post_form(url, data)
