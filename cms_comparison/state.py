"""Initial application state.

``get_initial_app_state`` is the public entry point: it fetches (or reuses)
the CMS data set and assembles the snapshot the UI layer starts from.
"""

import logging

from cms_comparison.config.settings import Settings, get_settings
from cms_comparison.filters.service import (
    get_unfiltered_cms,
    initialize_basic_fields,
    initialize_special_fields,
)
from cms_comparison.ingestion.cache import CmsDataCache
from cms_comparison.ingestion.transport import Fetch
from cms_comparison.models.cms import ReceivedCmsData
from cms_comparison.models.state import (
    SHOW_ALL,
    AppState,
    FilterFields,
    FilterFieldSet,
)

logger = logging.getLogger(__name__)


def construct_app_state(data: ReceivedCmsData) -> AppState:
    """Assemble the initial AppState from fetched and parsed data.

    ``untouched`` is a deep copy of ``current``; mutating one never affects
    the other.
    """
    current = FilterFieldSet(
        basic=initialize_basic_fields(data.fields.get("properties")),
        special=initialize_special_fields(),
    )
    untouched = current.model_copy(deep=True)

    return AppState(
        cms=data.cms,
        filter_fields=FilterFields(
            current=current,
            untouched=untouched,
            active_preset=SHOW_ALL,
        ),
        filter_results=get_unfiltered_cms(data.cms),
        show_aside=False,
        cookies_accepted=False,
    )


async def get_initial_app_state(
    fetch: Fetch | None = None,
    *,
    cache: CmsDataCache | None = None,
    settings: Settings | None = None,
) -> AppState:
    """Fetch the CMS data set and build the initial AppState.

    Args:
        fetch: Fetch capability. Defaults to HTTP via an httpx client owned
            by the cache.
        cache: Shared cache. Callers that pass the same cache fetch once;
            without one every call fetches afresh.
        settings: Defaults to environment settings.

    Raises:
        CmsDataError: fetching, decoding or validating the data set failed.
    """
    settings = settings or get_settings()
    if cache is None:
        cache = CmsDataCache(
            settings.CMS_REPO_BASE_URL,
            settings.CMS_LIST_PATH,
            timeout=settings.HTTP_TIMEOUT_S,
        )

    data = await cache.get(fetch)

    state = construct_app_state(data)
    logger.info(
        "Initial app state ready: %d CMS, %d basic filter fields",
        len(state.cms),
        len(state.filter_fields.current.basic),
    )
    return state
