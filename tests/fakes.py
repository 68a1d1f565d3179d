"""Test doubles and fixture loaders shared across the suite."""

import asyncio
import copy
import json
from pathlib import Path
from typing import Any

import httpx

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "cms-data"
BASE_URL = "https://cms-data.test/"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURE_DIR / name).read_text(encoding="utf-8"))


class FakeResponse:
    """FetchResponse double. An exception ``body`` is raised by json()."""

    def __init__(self, body: Any, *, ok: bool = True, status_text: str = "OK") -> None:
        self._body = body
        self.ok = ok
        self.status_text = status_text

    async def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return copy.deepcopy(self._body)


class RecordingFetch:
    """Serves ``<base_url><name>`` from a dict and records requested URLs.

    Values may be a JSON body, a FakeResponse, or an exception to raise.
    Unknown names answer 'Not Found'.
    """

    def __init__(
        self,
        resources: dict[str, Any],
        base_url: str = BASE_URL,
        delay: float = 0.0,
    ) -> None:
        self.resources = resources
        self.base_url = base_url
        self.delay = delay
        self.urls: list[str] = []

    async def __call__(self, url: str) -> FakeResponse:
        self.urls.append(url)
        await asyncio.sleep(self.delay)
        name = url.removeprefix(self.base_url)
        if name not in self.resources:
            return FakeResponse(None, ok=False, status_text="Not Found")
        value = self.resources[name]
        if isinstance(value, FakeResponse):
            return value
        if isinstance(value, Exception):
            raise value
        return FakeResponse(value)


def mock_transport(
    resources: dict[str, Any],
    base_url: str = BASE_URL,
    delay: float = 0.0,
) -> httpx.MockTransport:
    """httpx transport serving JSON bodies from ``resources`` by filename."""

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        name = str(request.url).removeprefix(base_url)
        if name not in resources:
            return httpx.Response(404)
        return httpx.Response(200, json=resources[name])

    return httpx.MockTransport(handler)
