"""Initial filter fields and the unfiltered result set.

Only seeds filter state; matching CMS entries against user preferences is
the UI layer's job.
"""

from collections.abc import Mapping
from typing import Any

from cms_comparison.models.cms import Cms
from cms_comparison.models.common import Category, License, ScoreValue
from cms_comparison.models.state import (
    BasicField,
    CategoryField,
    FilterResult,
    ScoreField,
    SpecialField,
)
from cms_comparison.parsers.cms_parser import get_keys_of_sub_fields


def _score_field(raw: Mapping[str, Any]) -> ScoreField:
    return ScoreField(
        name=raw.get("name"),
        description=raw.get("description"),
        value=ScoreValue.DONT_CARE,
    )


def initialize_basic_fields(
    properties: Mapping[str, Any] | None,
) -> dict[str, BasicField]:
    """Build one field per field-metadata property, all set to don't-care.

    Entries with sub-keys become CategoryFields holding one ScoreField per
    sub-key; the rest become ScoreFields. Non-object entries are skipped.
    """
    basic: dict[str, BasicField] = {}
    if not properties:
        return basic

    for key, raw in properties.items():
        if not isinstance(raw, Mapping):
            continue
        sub_keys = get_keys_of_sub_fields(raw)
        if sub_keys:
            basic[key] = CategoryField(
                name=raw.get("name"),
                description=raw.get("description"),
                sub_fields={sub_key: _score_field(raw[sub_key]) for sub_key in sub_keys},
            )
        else:
            basic[key] = _score_field(raw)
    return basic


def initialize_special_fields() -> dict[str, SpecialField]:
    """License and category multi-selects, nothing selected."""
    return {
        "license": SpecialField(
            name="License",
            description="Licenses under which the CMS is available.",
            possible_values=[member.value for member in License],
        ),
        "category": SpecialField(
            name="Category",
            description="Kind of product the CMS is offered as.",
            possible_values=[member.value for member in Category],
        ),
    }


def get_unfiltered_cms(cms: Mapping[str, Cms]) -> list[FilterResult]:
    """Every CMS, satisfactory, with shares unset."""
    return [FilterResult(cms_key=key, satisfactory=True) for key in cms]
