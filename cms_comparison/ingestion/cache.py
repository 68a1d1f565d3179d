"""Single-slot memo for the aggregate fetch.

The first ``get`` starts the fetch; every later caller, including ones that
arrive while it is still running, awaits the same task. The slot is never
invalidated: a failed fetch stays failed for the lifetime of the cache.

Callers await the task through ``asyncio.shield``, so cancelling one caller
never cancels the fetch the others are waiting on. When no fetch capability
is passed in, the HTTP client belongs to the task itself and is closed when
the task settles.
"""

import asyncio
import logging

from cms_comparison.ingestion.fetcher import fetch_cms_list
from cms_comparison.ingestion.transport import Fetch, HttpxFetch
from cms_comparison.models.cms import ReceivedCmsData

logger = logging.getLogger(__name__)


class CmsDataCache:
    """Memoizes ReceivedCmsData for one bootstrap context."""

    def __init__(
        self,
        base_url: str,
        list_path: str = "cms-list.json",
        *,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url
        self._list_path = list_path
        self._timeout = timeout
        self._task: asyncio.Task[ReceivedCmsData] | None = None

    @property
    def is_primed(self) -> bool:
        """Whether a fetch has been started."""
        return self._task is not None

    async def get(self, fetch: Fetch | None = None) -> ReceivedCmsData:
        """Return the cached data, starting the fetch on first use.

        ``fetch`` is only used by the call that starts the fetch. Without
        one the fetch runs over an HttpxFetch owned by the cache.
        """
        if self._task is None:
            logger.info("Starting CMS data fetch from %s", self._base_url)
            self._task = asyncio.ensure_future(self._fetch(fetch))
        return await asyncio.shield(self._task)

    async def _fetch(self, fetch: Fetch | None) -> ReceivedCmsData:
        if fetch is not None:
            return await fetch_cms_list(fetch, self._base_url, self._list_path)
        async with HttpxFetch(timeout=self._timeout) as http_fetch:
            return await fetch_cms_list(http_fetch, self._base_url, self._list_path)
