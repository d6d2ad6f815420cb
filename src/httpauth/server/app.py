"""Build and run a Basic-auth protected static file server."""

from __future__ import annotations

import logging
import time as _time
from pathlib import Path
from typing import Any

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.staticfiles import StaticFiles

from httpauth.auth.protocol import Checker
from httpauth.server.router import AuthRouter

logger = logging.getLogger(__name__)


def build_app(directory: str | Path, checker: Checker, *, realm: str | None = None) -> Starlette:
    """Create a Starlette app serving ``directory`` behind Basic authentication.

    ``/health`` stays unauthenticated so load balancers can probe it.
    """
    start_time = _time.monotonic()

    async def _health(request: Any) -> JSONResponse:
        return JSONResponse({"status": "ok", "uptime_seconds": round(_time.monotonic() - start_time, 1)})

    app = Starlette(routes=[Route("/health", endpoint=_health, methods=["GET"])])
    AuthRouter(checker, app.router, realm=realm).mount("/", StaticFiles(directory=directory, html=True), name="files")
    return app


def validate_host_port(host: str, port: int) -> None:
    """Validate host and port parameters."""
    if not host:
        raise ValueError("Host must not be empty")
    if not isinstance(port, int) or port < 1 or port > 65535:
        raise ValueError(f"Port must be between 1 and 65535, got {port}")


async def run_http(app: Starlette, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve ``app`` with uvicorn until shutdown."""
    validate_host_port(host, port)
    logger.info("Starting HTTP server on %s:%d", host, port)
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    await uvicorn.Server(config).serve()
