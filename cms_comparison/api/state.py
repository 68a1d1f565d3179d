"""Initial state endpoints.

GET /v1/state            — full initial application state
GET /v1/cms              — CMS keys, ordered by name
GET /v1/cms/{cms_key}    — one parsed CMS entry

Data set failures (fetch, decode, validation) answer 502.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from cms_comparison.api.dependencies import get_cms_cache, get_fetch
from cms_comparison.errors import CmsDataError
from cms_comparison.ingestion.cache import CmsDataCache
from cms_comparison.ingestion.transport import Fetch
from cms_comparison.models.cms import Cms, ReceivedCmsData
from cms_comparison.models.state import AppState
from cms_comparison.state import construct_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["state"])


async def _load(cache: CmsDataCache, fetch: Fetch) -> ReceivedCmsData:
    try:
        return await cache.get(fetch)
    except CmsDataError as exc:
        logger.error("CMS data unavailable: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("/state", response_model=AppState)
async def read_state(
    cache: CmsDataCache = Depends(get_cms_cache),
    fetch: Fetch = Depends(get_fetch),
) -> AppState:
    data = await _load(cache, fetch)
    return construct_app_state(data)


@router.get("/cms", response_model=list[str])
async def list_cms(
    cache: CmsDataCache = Depends(get_cms_cache),
    fetch: Fetch = Depends(get_fetch),
) -> list[str]:
    data = await _load(cache, fetch)
    return list(data.cms)


@router.get("/cms/{cms_key}", response_model=Cms)
async def read_cms(
    cms_key: str,
    cache: CmsDataCache = Depends(get_cms_cache),
    fetch: Fetch = Depends(get_fetch),
) -> Cms:
    data = await _load(cache, fetch)
    if cms_key not in data.cms:
        raise HTTPException(status_code=404, detail=f"CMS {cms_key} not found")
    return data.cms[cms_key]
