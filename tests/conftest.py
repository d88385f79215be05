"""Shared fixtures: an in-process stand-in for aiohttp sessions."""
from __future__ import annotations

from typing import Dict, List, Union

import aiohttp
import pytest

from taigi_lookup.config import SettingsLoader


class FakeResponse:
    def __init__(self, body: Union[str, BaseException]) -> None:
        self._body = body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def text(self) -> str:
        if isinstance(self._body, BaseException):
            raise self._body
        return self._body


class FakeSession:
    """Answers GET requests by host with canned bodies or exceptions.

    A route whose value is an exception raised on ``get`` simulates a transport
    failure; wrap it in ``FakeResponse`` to fail while reading the body.
    """

    def __init__(self, routes: Dict[str, object] | None = None) -> None:
        self.routes = routes or {}
        self.requested: List[str] = []

    async def get(self, url: str) -> FakeResponse:
        self.requested.append(url)
        for prefix, answer in self.routes.items():
            if url.startswith(prefix):
                if isinstance(answer, FakeResponse):
                    return answer
                if isinstance(answer, BaseException):
                    raise answer
                return FakeResponse(answer)
        raise aiohttp.ClientConnectionError(f"no route for {url}")


@pytest.fixture
def settings():
    return SettingsLoader().load()


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def make_response():
    return FakeResponse
