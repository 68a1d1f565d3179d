"""FastAPI dependency factories.

The fetch capability and the data cache live on ``app.state`` so every
request of one application shares a single fetch of the data set. Both are
created lazily; tests may pre-seed them.
"""

from fastapi import Depends, Request

from cms_comparison.config.settings import Settings, get_settings
from cms_comparison.ingestion.cache import CmsDataCache
from cms_comparison.ingestion.transport import Fetch, HttpxFetch


def get_fetch(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Fetch:
    state = request.app.state
    if getattr(state, "fetch", None) is None:
        state.fetch = HttpxFetch(timeout=settings.HTTP_TIMEOUT_S)
    return state.fetch


def get_cms_cache(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> CmsDataCache:
    state = request.app.state
    if getattr(state, "cms_cache", None) is None:
        state.cms_cache = CmsDataCache(
            settings.CMS_REPO_BASE_URL,
            settings.CMS_LIST_PATH,
            timeout=settings.HTTP_TIMEOUT_S,
        )
    return state.cms_cache
