"""Fetch capability used to retrieve CMS resources.

The aggregate fetch only needs a callable from URL to a response exposing
``ok``, ``status_text`` and an awaitable ``json()``. Two implementations:

- HttpxFetch: HTTP(S) via a shared httpx.AsyncClient.
- LocalFetch: files of a local checkout of the data repository.

Tests substitute plain async functions or httpx.MockTransport.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


@runtime_checkable
class FetchResponse(Protocol):
    """Minimal response surface the aggregate fetch relies on."""

    @property
    def ok(self) -> bool: ...

    @property
    def status_text(self) -> str: ...

    async def json(self) -> Any: ...


Fetch = Callable[[str], Awaitable[FetchResponse]]


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


class HttpxResponse:
    """Adapts an httpx.Response to FetchResponse."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase or str(self._response.status_code)

    async def json(self) -> Any:
        return self._response.json()


class HttpxFetch:
    """Fetch over HTTP with one pooled AsyncClient.

    Owns the client unless one is passed in. ``transport`` applies to the
    owned client only. Use as an async context manager or call ``aclose()``
    when done.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def __call__(self, url: str) -> HttpxResponse:
        logger.debug("GET %s", url)
        response = await self._client.get(url)
        return HttpxResponse(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxFetch":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# Local checkout
# ---------------------------------------------------------------------------


class LocalResponse:
    """FetchResponse backed by a file on disk; missing files are 'Not Found'."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def ok(self) -> bool:
        return self._path.is_file()

    @property
    def status_text(self) -> str:
        return "OK" if self.ok else "Not Found"

    async def json(self) -> Any:
        text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        return json.loads(text)


class LocalFetch:
    """Resolve URLs against a local directory.

    ``base_url`` is stripped from incoming URLs so the same pipeline can run
    against a checkout of the data repository.
    """

    def __init__(self, root: str | Path, base_url: str = "") -> None:
        self._root = Path(root)
        self._base_url = base_url

    async def __call__(self, url: str) -> LocalResponse:
        relative = url.removeprefix(self._base_url).lstrip("/")
        return LocalResponse(self._root / relative)
