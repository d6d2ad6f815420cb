"""ASGI middleware enforcing HTTP Basic authentication."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextvars import ContextVar
from http import HTTPStatus
from typing import Any

from starlette import status
from starlette.datastructures import Headers
from starlette.responses import PlainTextResponse
from starlette.routing import request_response
from starlette.websockets import WebSocketClose

from httpauth.auth.basic import parse_basic_auth
from httpauth.auth.protocol import Checker

logger = logging.getLogger(__name__)

# Username of the authenticated caller, visible to the wrapped app
remote_user_var: ContextVar[str | None] = ContextVar("remote_user", default=None)


def challenge(realm: str | None = None) -> str:
    """Return the ``WWW-Authenticate`` value sent with a 401 response."""
    if realm is None:
        return "Basic"
    escaped = realm.replace("\\", "\\\\").replace('"', '\\"')
    return f'Basic realm="{escaped}"'


class BasicAuthMiddleware:
    """ASGI middleware that checks Basic credentials before calling ``app``.

    Requests whose credentials the checker rejects get a 401 response with a
    ``WWW-Authenticate`` challenge and never reach ``app``. Accepted requests
    are forwarded untouched, with ``remote_user_var`` set for the duration of
    the call.

    Args:
        app: The ASGI application to wrap.
        checker: A ``Checker`` implementation.
        realm: Optional realm parameter for the challenge header.
    """

    def __init__(self, app: Any, checker: Checker, *, realm: str | None = None) -> None:
        self._app = app
        self._checker = checker
        self._challenge = challenge(realm)

    @property
    def app(self) -> Any:
        return self._app

    @property
    def checker(self) -> Checker:
        return self._checker

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self._app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        username, password, present = parse_basic_auth(headers.get("authorization"))

        if not self._checker.check(username, password):
            logger.warning("Authentication failed for %s", scope.get("path", ""))
            await self._reject(scope, receive, send)
            return

        token = remote_user_var.set(username if present else None)
        try:
            await self._app(scope, receive, send)
        finally:
            remote_user_var.reset(token)

    async def _reject(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Send the 401 challenge, or close an unauthenticated websocket."""
        if scope["type"] == "websocket":
            await WebSocketClose(code=status.WS_1008_POLICY_VIOLATION)(scope, receive, send)
            return
        response = PlainTextResponse(
            HTTPStatus.UNAUTHORIZED.phrase,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": self._challenge},
        )
        await response(scope, receive, send)


def require_basic_auth(
    checker: Checker,
    endpoint: Callable[..., Any],
    *,
    realm: str | None = None,
) -> BasicAuthMiddleware:
    """Wrap a Starlette request/response endpoint with Basic authentication.

    ``endpoint`` takes a ``Request`` and returns a ``Response``; it may be
    sync or async. The result is an ASGI app usable anywhere Starlette
    accepts one.
    """
    return BasicAuthMiddleware(request_response(endpoint), checker, realm=realm)
