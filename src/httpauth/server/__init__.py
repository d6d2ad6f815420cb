"""Server-side building blocks for httpauth."""

from httpauth.server.app import build_app, run_http
from httpauth.server.router import AuthRouter, RouteRegistry, handle, handle_func

__all__ = [
    "AuthRouter",
    "RouteRegistry",
    "handle",
    "handle_func",
    "build_app",
    "run_http",
]
