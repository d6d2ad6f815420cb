"""AuthRouter: register routes that are all guarded by one Checker."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from httpauth.auth.middleware import BasicAuthMiddleware, require_basic_auth
from httpauth.auth.protocol import Checker

logger = logging.getLogger(__name__)


@runtime_checkable
class RouteRegistry(Protocol):
    """The part of Starlette's ``Router`` / ``Starlette`` API used here."""

    def add_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        methods: list[str] | None = None,
        name: str | None = None,
        include_in_schema: bool = True,
    ) -> None: ...

    def mount(self, path: str, app: Any, name: str | None = None) -> None: ...


class AuthRouter:
    """Pairs a ``Checker`` with a router so every registration is guarded.

    Each path is wrapped in its own ``BasicAuthMiddleware``; all of them share
    the same checker.

    Args:
        checker: The ``Checker`` applied to every route.
        router: A Starlette ``Router`` or ``Starlette`` application.
        realm: Optional realm parameter for the challenge header.
    """

    def __init__(self, checker: Checker, router: RouteRegistry, *, realm: str | None = None) -> None:
        self._checker = checker
        self._router = router
        self._realm = realm

    @property
    def checker(self) -> Checker:
        return self._checker

    @property
    def router(self) -> RouteRegistry:
        return self._router

    def handle(
        self,
        path: str,
        app: Any,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Register an ASGI app at ``path`` behind Basic authentication."""
        wrapped = BasicAuthMiddleware(app, self._checker, realm=self._realm)
        self._router.add_route(path, wrapped, methods=methods, name=name)
        logger.debug("Registered protected route %s", path)

    def handle_func(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Register a request/response endpoint at ``path`` behind Basic authentication.

        Like ``handle``, every method is accepted unless ``methods`` is given.
        """
        wrapped = require_basic_auth(self._checker, endpoint, realm=self._realm)
        self._router.add_route(
            path,
            wrapped,
            methods=methods,
            name=name or getattr(endpoint, "__name__", None),
        )
        logger.debug("Registered protected endpoint %s", path)

    def mount(self, path: str, app: Any, *, name: str | None = None) -> None:
        """Mount an ASGI app under ``path`` behind Basic authentication."""
        self._router.mount(path, BasicAuthMiddleware(app, self._checker, realm=self._realm), name=name)
        logger.debug("Mounted protected app at %s", path)


def handle(checker: Checker, router: RouteRegistry, path: str, app: Any) -> None:
    """Register ``app`` on ``router`` at ``path``, guarded by ``checker``."""
    AuthRouter(checker, router).handle(path, app)


def handle_func(checker: Checker, router: RouteRegistry, path: str, endpoint: Callable[..., Any]) -> None:
    """Register ``endpoint`` on ``router`` at ``path``, guarded by ``checker``."""
    AuthRouter(checker, router).handle_func(path, endpoint)
