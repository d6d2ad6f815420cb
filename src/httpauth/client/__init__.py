"""Client-side request signing for httpauth."""

from httpauth.client.client import AsyncSigningClient, SigningClient, get, head, post, post_form, send
from httpauth.client.signer import BasicAuthSigner, Signer, SignerAuth

__all__ = [
    "Signer",
    "BasicAuthSigner",
    "SignerAuth",
    "SigningClient",
    "AsyncSigningClient",
    "send",
    "get",
    "head",
    "post",
    "post_form",
]
