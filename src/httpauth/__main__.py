"""CLI entry point: python -m httpauth."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from httpauth import serve
from httpauth._utils import parse_credentials, split_env_credentials

logger = logging.getLogger(__name__)

USERS_ENV_VAR = "HTTPAUTH_USERS"


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the httpauth CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m httpauth",
        description="Serve a directory over HTTP behind Basic authentication.",
    )

    parser.add_argument(
        "--directory",
        required=True,
        type=Path,
        help="Directory of static files to serve.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host address (default: 127.0.0.1).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port (default: 8000, range: 1-65535).",
    )

    # Authentication
    parser.add_argument(
        "--user",
        action="append",
        default=None,
        metavar="USER:PASSWORD",
        help=f"Accepted credentials, repeatable (default: ${USERS_ENV_VAR}, comma-separated).",
    )
    parser.add_argument(
        "--no-auth",
        action="store_true",
        default=False,
        help="Accept every request regardless of credentials.",
    )
    parser.add_argument(
        "--realm",
        default=None,
        help="Realm parameter for the WWW-Authenticate challenge (default: none).",
    )

    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level (default: INFO).",
    )

    return parser


def main() -> None:
    """CLI entry point.

    Exit codes:
        0 - Normal shutdown
        1 - Invalid arguments (missing directory, invalid port, bad credentials)
        2 - Startup failure (argparse error, serve() exception)
    """
    parser = _build_parser()
    args = parser.parse_args()

    if args.port < 1 or args.port > 65535:
        print(f"Error: --port must be in range 1-65535, got {args.port}.", file=sys.stderr)
        sys.exit(1)

    directory: Path = args.directory
    if not directory.is_dir():
        print(f"Error: --directory '{directory}' is not a directory.", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Resolve credentials: --user → $HTTPAUTH_USERS
    entries = args.user if args.user else split_env_credentials(os.environ.get(USERS_ENV_VAR, ""))
    try:
        credentials = parse_credentials(entries)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.no_auth:
        logger.warning("Authentication disabled (--no-auth)")
    else:
        logger.info("Basic authentication enabled for %d user(s)", len(credentials))

    try:
        serve(
            directory,
            credentials=credentials,
            allow_all=args.no_auth,
            host=args.host,
            port=args.port,
            realm=args.realm,
            log_level=args.log_level,
        )
    except Exception:
        logger.exception("Server startup failed.")
        sys.exit(2)


if __name__ == "__main__":
    main()
