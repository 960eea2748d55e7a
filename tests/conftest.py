"""Shared pytest fixtures: fake clocks and fake HTTP sessions."""

from __future__ import annotations

from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

import pytest
import requests

from mbquery.platform.musicbrainz import RequestScheduler


def make_response(
    status: int,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
    url: str = "https://musicbrainz.org/ws/2/",
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""

    response = requests.Response()
    response.status_code = status
    response._content = body  # pyright: ignore[reportPrivateUsage]
    response.headers.update(headers or {})
    response.url = url
    response.reason = HTTPStatus(status).phrase
    return response


class FakeClock:
    """Monotonic clock that only advances when something sleeps."""

    def __init__(self, start: float = 100.0) -> None:
        self.now: float = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeSession:
    """Stand-in for ``requests.Session`` replaying queued responses."""

    def __init__(self, responses: Iterable[requests.Response | Exception] = ()) -> None:
        self.responses: list[requests.Response | Exception] = list(responses)
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed: bool = False

    def get(self, url: str, headers: dict[str, str] | None = None, **_kwargs: Any) -> requests.Response:
        self.calls.append((url, dict(headers or {})))
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def unthrottled() -> RequestScheduler:
    """Scheduler that admits every request immediately."""

    return RequestScheduler(0)
