"""Aggregate fetch of the CMS data set.

Reads the manifest, then fetches the field metadata and every CMS resource
concurrently. The batch is all-or-nothing: one failed resource fails the
whole data set and no partial result is returned.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from cms_comparison.errors import (
    BatchFetchError,
    ResourceDecodeError,
    ResourceError,
    ResourceStatusError,
    ResourceTransportError,
)
from cms_comparison.ingestion.transport import Fetch
from cms_comparison.models.cms import CmsList, ReceivedCmsData
from cms_comparison.parsers.cms_parser import parse_cms

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Single resource
# ---------------------------------------------------------------------------


async def _get_json(fetch: Fetch, url: str, resource: str) -> Any:
    try:
        response = await fetch(url)
    except Exception as exc:
        raise ResourceTransportError(resource, exc) from exc

    if not response.ok:
        raise ResourceStatusError(resource, response.status_text)

    try:
        return await response.json()
    except ValueError as exc:
        raise ResourceDecodeError(resource, exc) from exc
    except OSError as exc:
        raise ResourceTransportError(resource, exc) from exc


async def fetch_resource(fetch: Fetch, base_url: str, resource_id: str) -> Any:
    """Fetch and decode ``<base_url><resource_id>.json``."""
    resource = f"{resource_id}.json"
    return await _get_json(fetch, f"{base_url}{resource}", resource)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def _record_name(record: Mapping[str, Any]) -> str:
    return record["name"]


def sort_cms_by_name(
    records: list[T],
    name_of: Callable[[T], str] = _record_name,
) -> list[T]:
    """Sort case-insensitively by name, ascending. Ties keep input order."""
    return sorted(records, key=lambda record: name_of(record).lower())


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------


async def fetch_cms_data(
    fields: str,
    cms: list[str],
    fetch: Fetch,
    base_url: str,
) -> ReceivedCmsData:
    """Fetch field metadata plus every CMS resource and parse the entries.

    Args:
        fields: Resource id of the field metadata.
        cms: Resource ids of the CMS entries (filenames without extension).
        fetch: Fetch capability.
        base_url: Prefix for every resource URL.

    Returns:
        ReceivedCmsData whose ``cms`` maps each resource id to the entry
        parsed from that resource, ordered by entry name.

    Raises:
        BatchFetchError: any resource failed to fetch or decode.
        InvalidVocabularyError: an entry declares an unknown license or
            category.
        InvalidCmsRecordError: an entry is structurally malformed.
        ResourceDecodeError: the field metadata is not a JSON object.
    """
    logger.info("Fetching field metadata and %d CMS resources", len(cms))

    try:
        values = await asyncio.gather(
            *(fetch_resource(fetch, base_url, resource_id) for resource_id in [fields, *cms])
        )
    except ResourceError as exc:
        logger.error("CMS batch fetch failed: %s", exc)
        raise BatchFetchError(exc) from exc

    fields_data, *raw_cms = values
    entries = [
        (key, parse_cms(record, key)) for key, record in zip(cms, raw_cms)
    ]
    keyed = sort_cms_by_name(entries, name_of=lambda pair: pair[1].name)
    parsed = dict(keyed)

    logger.info("Parsed %d CMS entries", len(parsed))
    try:
        return ReceivedCmsData(fields=fields_data, cms=parsed)
    except ValueError as exc:
        raise ResourceDecodeError(f"{fields}.json", exc) from exc


async def fetch_cms_list(
    fetch: Fetch,
    base_url: str,
    list_path: str = "cms-list.json",
) -> ReceivedCmsData:
    """Read the manifest at ``<base_url><list_path>`` and fetch everything it names."""
    data = await _get_json(fetch, f"{base_url}{list_path}", list_path)
    try:
        manifest = CmsList.model_validate(data)
    except ValueError as exc:
        raise ResourceDecodeError(list_path, exc) from exc

    return await fetch_cms_data(manifest.fields, manifest.cms, fetch, base_url)
