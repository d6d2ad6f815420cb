"""Server-side Basic authentication for httpauth."""

from httpauth.auth.basic import encode_basic_auth, parse_basic_auth
from httpauth.auth.checkers import AllowAll, StaticCredentials
from httpauth.auth.middleware import BasicAuthMiddleware, remote_user_var, require_basic_auth
from httpauth.auth.protocol import Checker

__all__ = [
    "Checker",
    "StaticCredentials",
    "AllowAll",
    "BasicAuthMiddleware",
    "require_basic_auth",
    "remote_user_var",
    "parse_basic_auth",
    "encode_basic_auth",
]
