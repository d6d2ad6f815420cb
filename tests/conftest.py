"""Shared test fixtures for httpauth tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from starlette.requests import Request
from starlette.responses import PlainTextResponse

# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


@dataclass
class FixedChecker:
    """Checker that returns a fixed answer and records what it was asked."""

    valid: bool
    calls: list[tuple[str, str]] = field(default_factory=list)

    def check(self, username: str, password: str) -> bool:
        self.calls.append((username, password))
        return self.valid


class OKHandler:
    """Request/response endpoint writing 200 "OK" and flagging that it ran."""

    def __init__(self) -> None:
        self.called = False

    def __call__(self, request: Request) -> PlainTextResponse:
        self.called = True
        return PlainTextResponse("OK")


class OKApp:
    """Raw ASGI app writing 200 "OK" and flagging that it ran."""

    def __init__(self) -> None:
        self.called = False

    async def __call__(self, scope, receive, send) -> None:
        self.called = True
        await PlainTextResponse("OK")(scope, receive, send)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def accept() -> FixedChecker:
    return FixedChecker(True)


@pytest.fixture
def reject() -> FixedChecker:
    return FixedChecker(False)


@pytest.fixture
def ok_handler() -> OKHandler:
    return OKHandler()


@pytest.fixture
def ok_app() -> OKApp:
    return OKApp()
