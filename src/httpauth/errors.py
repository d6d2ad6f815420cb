"""Exception types raised by httpauth."""

from __future__ import annotations


class HTTPAuthError(Exception):
    """Base class for httpauth errors."""


class SigningError(HTTPAuthError):
    """Raised by a ``Signer`` that cannot attach credentials to a request."""
