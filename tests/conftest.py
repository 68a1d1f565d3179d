"""Shared pytest fixtures for the CMS comparison test suite.

Provides:
- anyio_backend: run async tests on asyncio only
- fixture_resources: the three-CMS data set under tests/fixtures/cms-data
- recording_fetch: in-memory fetch capability over that data set
"""

from typing import Any

import pytest

from fakes import FIXTURE_DIR, RecordingFetch, load_fixture


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fixture_resources() -> dict[str, Any]:
    """The fixture data set keyed by filename."""
    return {path.name: load_fixture(path.name) for path in FIXTURE_DIR.glob("*.json")}


@pytest.fixture
def recording_fetch(fixture_resources: dict[str, Any]) -> RecordingFetch:
    return RecordingFetch(fixture_resources)


@pytest.fixture
def strapi_record() -> dict[str, Any]:
    return load_fixture("strapi.json")


@pytest.fixture
def fields_metadata() -> dict[str, Any]:
    return load_fixture("fields.json")
