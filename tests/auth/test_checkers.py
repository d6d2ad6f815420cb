"""Tests for the built-in Checker implementations."""

from __future__ import annotations

import pytest

from httpauth.auth.checkers import AllowAll, StaticCredentials
from httpauth.auth.protocol import Checker

CREDS = {"alice": "shhhh", "bob": ""}


class TestStaticCredentials:
    @pytest.mark.parametrize(
        ("username", "password", "valid"),
        [
            ("", "", False),  # empty
            ("cecil", "", False),  # unknown user
            ("alice", "bob", False),  # wrong password
            ("alice", "shhhh", True),
            ("bob", "", True),  # correct empty password
            ("Alice", "shhhh", False),  # case-sensitive username
            ("alice", "SHHHH", False),  # case-sensitive password
            ("alice", " shhhh", False),  # no trimming
        ],
    )
    def test_check(self, username: str, password: str, valid: bool):
        assert StaticCredentials(CREDS).check(username, password) is valid

    def test_none_store_rejects(self):
        checker = StaticCredentials(None)
        assert checker.check("alice", "") is False
        assert checker.check("", "") is False

    def test_empty_store_rejects(self):
        assert StaticCredentials({}).check("", "") is False

    def test_empty_username_key_is_valid_when_present(self):
        assert StaticCredentials({"": "pw"}).check("", "pw") is True

    def test_lone_surrogates_rejected_without_error(self):
        checker = StaticCredentials({"alice": "pw", "\udc80": "x"})
        assert checker.check("alice", "\udc80") is False
        assert checker.check("\udc80", "pw") is False
        assert checker.check("\udc80", "x") is True

    def test_non_ascii_credentials(self):
        checker = StaticCredentials({"jörg": "pässwörd"})
        assert checker.check("jörg", "pässwörd") is True
        assert checker.check("jörg", "passwort") is False

    def test_mutations_are_observed(self):
        store: dict[str, str] = {}
        checker = StaticCredentials(store)
        assert checker.check("alice", "pw") is False

        store["alice"] = "pw"
        assert checker.check("alice", "pw") is True

        del store["alice"]
        assert checker.check("alice", "pw") is False

    def test_repeated_checks_are_stable(self):
        checker = StaticCredentials(CREDS)
        results = {checker.check("alice", "wrong") for _ in range(50)}
        assert results == {False}
        assert checker.check("alice", "shhhh") is True

    def test_satisfies_protocol(self):
        assert isinstance(StaticCredentials(CREDS), Checker)


class TestAllowAll:
    @pytest.mark.parametrize(("username", "password"), [("", ""), ("alice", "x"), ("a:b", "::")])
    def test_always_true(self, username: str, password: str):
        assert AllowAll().check(username, password) is True

    def test_satisfies_protocol(self):
        assert isinstance(AllowAll(), Checker)
