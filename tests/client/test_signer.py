"""Tests for Signer implementations and the httpx auth adapter."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from httpauth.auth.basic import encode_basic_auth, parse_basic_auth
from httpauth.client.signer import BasicAuthSigner, Signer, SignerAuth
from httpauth.errors import SigningError


class FailingSigner:
    def sign(self, request: httpx.Request) -> None:
        raise SigningError("token service unavailable")


class TestBasicAuthSigner:
    def test_sets_authorization_header(self):
        request = httpx.Request("GET", "http://example.com/")
        BasicAuthSigner("alice", "pw").sign(request)
        assert request.headers["Authorization"] == encode_basic_auth("alice", "pw")

    def test_replaces_existing_header(self):
        request = httpx.Request("GET", "http://example.com/", headers={"Authorization": "Bearer old"})
        BasicAuthSigner("alice", "pw").sign(request)
        assert request.headers.get_list("Authorization") == [encode_basic_auth("alice", "pw")]

    def test_password_with_colon_round_trips(self):
        request = httpx.Request("GET", "http://example.com/")
        BasicAuthSigner("alice", "a:b").sign(request)
        assert parse_basic_auth(request.headers["Authorization"]) == ("alice", "a:b", True)

    def test_is_immutable(self):
        signer = BasicAuthSigner("alice", "pw")
        with pytest.raises(dataclasses.FrozenInstanceError):
            signer.username = "bob"  # type: ignore[misc]

    def test_satisfies_protocol(self):
        assert isinstance(BasicAuthSigner("a", "b"), Signer)
        assert isinstance(FailingSigner(), Signer)


class TestSignerAuth:
    def test_signs_through_httpx_auth(self):
        seen: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("authorization"))
            return httpx.Response(200)

        with httpx.Client(transport=httpx.MockTransport(handler), auth=SignerAuth(BasicAuthSigner("alice", "pw"))) as client:
            client.get("http://example.com/")

        assert seen == [encode_basic_auth("alice", "pw")]

    def test_signing_error_propagates(self):
        handler_calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            handler_calls.append(request)
            return httpx.Response(200)

        with httpx.Client(transport=httpx.MockTransport(handler), auth=SignerAuth(FailingSigner())) as client:
            with pytest.raises(SigningError, match="token service unavailable"):
                client.get("http://example.com/")

        assert handler_calls == []
