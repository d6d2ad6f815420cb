"""httpauth: HTTP Basic authentication for ASGI servers and httpx clients."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from httpauth.auth import (
    AllowAll,
    BasicAuthMiddleware,
    Checker,
    StaticCredentials,
    encode_basic_auth,
    parse_basic_auth,
    remote_user_var,
    require_basic_auth,
)
from httpauth.client import (
    AsyncSigningClient,
    BasicAuthSigner,
    Signer,
    SignerAuth,
    SigningClient,
)
from httpauth.errors import HTTPAuthError, SigningError
from httpauth.server import AuthRouter, build_app, handle, handle_func, run_http

__all__ = [
    # Public API
    "serve",
    # Server side
    "Checker",
    "StaticCredentials",
    "AllowAll",
    "BasicAuthMiddleware",
    "require_basic_auth",
    "remote_user_var",
    "AuthRouter",
    "handle",
    "handle_func",
    "build_app",
    # Client side
    "Signer",
    "BasicAuthSigner",
    "SignerAuth",
    "SigningClient",
    "AsyncSigningClient",
    # Header codec
    "parse_basic_auth",
    "encode_basic_auth",
    # Errors
    "HTTPAuthError",
    "SigningError",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def serve(
    directory: str | Path,
    *,
    credentials: Mapping[str, str] | None = None,
    allow_all: bool = False,
    host: str = "127.0.0.1",
    port: int = 8000,
    realm: str | None = None,
    log_level: str | None = None,
) -> None:
    """Serve ``directory`` over HTTP behind Basic authentication.

    Args:
        directory: Directory of static files to serve.
        credentials: Usernames mapped to passwords. ``None`` or empty rejects
            every request unless ``allow_all`` is set.
        allow_all: Accept any credentials (disables the check).
        host: Host address to bind.
        port: Port number to bind.
        realm: Optional realm parameter for the challenge header.
        log_level: Set the log level for the httpauth logger (e.g. "DEBUG", "INFO").
    """
    if log_level is not None:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level.upper() not in valid_levels:
            raise ValueError(f"Unknown log level: {log_level!r}. Valid: {sorted(valid_levels)}")
        logging.getLogger("httpauth").setLevel(getattr(logging, log_level.upper()))

    checker: Checker = AllowAll() if allow_all else StaticCredentials(credentials)
    if not allow_all and not credentials:
        logger.warning("No credentials configured; every request will be rejected")

    app = build_app(directory, checker, realm=realm)
    logger.info("Serving '%s' with %s", directory, type(checker).__name__)
    asyncio.run(run_http(app, host=host, port=port))
