"""Fetch and validate a CMS comparison data set.

Runs the same pipeline the API uses and prints one line per CMS entry.
Exits non-zero with the error chain if any resource fails to fetch, decode
or validate.

Usage:
    python -m scripts [--source URL_OR_DIR] [--list-path cms-list.json]

    --source     Base URL or local checkout directory (default: settings)
    --list-path  Manifest path relative to the source
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from cms_comparison.config.settings import get_settings
from cms_comparison.errors import CmsDataError
from cms_comparison.ingestion.transport import Fetch, LocalFetch
from cms_comparison.models.cms import CategoryCmsProperty
from cms_comparison.models.state import AppState
from cms_comparison.state import get_initial_app_state


def _error_chain(exc: BaseException) -> list[str]:
    """Messages of ``exc`` and every exception it was raised from."""
    chain: list[str] = []
    current: BaseException | None = exc
    while current is not None:
        chain.append(f"{type(current).__name__}: {current}")
        current = current.__cause__
    return chain


def format_summary(state: AppState) -> list[str]:
    """One line per CMS: key, name, licenses, categories, property counts."""
    lines = []
    for key, cms in state.cms.items():
        groups = sum(
            1 for p in cms.properties.values() if isinstance(p, CategoryCmsProperty)
        )
        lines.append(
            f"  {key:<24} {cms.name:<24} "
            f"licenses={'/'.join(cms.license)} "
            f"categories={'/'.join(cms.category)} "
            f"properties={len(cms.properties)} (groups={groups})"
        )
    return lines


async def _run(source: str, list_path: str) -> AppState:
    settings = get_settings().model_copy(
        update={"CMS_REPO_BASE_URL": source, "CMS_LIST_PATH": list_path},
    )
    if Path(source).is_dir():
        fetch: Fetch = LocalFetch(source, base_url=source)
        return await get_initial_app_state(fetch, settings=settings)
    return await get_initial_app_state(settings=settings)


def main(argv: list[str] | None = None) -> int:
    """Check the data set entry point."""
    defaults = get_settings()
    parser = argparse.ArgumentParser(
        description="Fetch and validate the CMS comparison data set",
    )
    parser.add_argument("--source", default=defaults.CMS_REPO_BASE_URL)
    parser.add_argument("--list-path", default=defaults.CMS_LIST_PATH)
    args = parser.parse_args(argv)

    print(f"=== CMS data check: {args.source} ===\n")
    try:
        state = asyncio.run(_run(args.source, args.list_path))
    except CmsDataError as exc:
        print("FAIL")
        for line in _error_chain(exc):
            print(f"  {line}")
        return 1

    for line in format_summary(state):
        print(line)
    print(
        f"\n--- {len(state.cms)} CMS | "
        f"{len(state.filter_fields.current.basic)} filter fields ---"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
