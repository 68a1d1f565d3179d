"""Parse one raw CMS record into a validated Cms.

Licenses and categories are slash-delimited token lists checked against the
closed vocabulary. Properties are either leaves (the raw mapping has a
``value`` key) or groups whose every non-reserved object key is a nested
leaf.

Any failure raises and aborts the whole data set. Structural failures are
reported as InvalidCmsRecordError naming the CMS.
"""

from collections.abc import Mapping
from typing import Any

from cms_comparison.errors import (
    CmsDataError,
    InvalidCmsRecordError,
    InvalidVocabularyError,
)
from cms_comparison.models.cms import (
    BooleanCmsProperty,
    CategoryCmsProperty,
    Cms,
)
from cms_comparison.models.common import RESERVED_KEYS
from cms_comparison.parsers.validation import categories_are_valid, licenses_are_valid
from cms_comparison.parsers.value_parser import parse_value


def get_keys_of_sub_fields(group: Mapping[str, Any]) -> list[str]:
    """Keys of a grouped property or field other than name/description.

    Only object values count; a stray scalar (e.g. a free-text note next to
    the sub-fields) is not a sub-field.
    """
    return [
        key for key, value in group.items()
        if key not in RESERVED_KEYS and isinstance(value, Mapping)
    ]


def is_leaf_property(raw: Mapping[str, Any]) -> bool:
    """A raw property is a leaf iff it carries a ``value`` key.

    A JSON null still counts as present.
    """
    return "value" in raw


def parse_property(raw: Mapping[str, Any]) -> BooleanCmsProperty | CategoryCmsProperty:
    if is_leaf_property(raw):
        return parse_value(raw)

    return CategoryCmsProperty(
        name=raw.get("name"),
        description=raw.get("description"),
        sub_properties={
            key: parse_value(raw[key]) for key in get_keys_of_sub_fields(raw)
        },
    )


def _build_cms(data: Mapping[str, Any], name: Any) -> Cms:
    licenses = data["license"].split("/")
    if not licenses_are_valid(licenses):
        raise InvalidVocabularyError(name, "licenses", licenses)

    categories = data["category"].split("/")
    if not categories_are_valid(categories):
        raise InvalidVocabularyError(name, "categories", categories)

    properties = {
        key: parse_property(raw) for key, raw in data["properties"].items()
    }

    return Cms(
        name=name,
        version=data.get("version"),
        inception=data.get("inception"),
        last_updated=data.get("lastUpdated"),
        git_hub_url=data.get("gitHubURL"),
        teaser=data.get("teaser"),
        system_requirements=data.get("systemRequirements"),
        special_features=data.get("specialFeatures"),
        license=licenses,
        category=categories,
        properties=properties,
    )


def parse_cms(data: Mapping[str, Any], resource_id: str | None = None) -> Cms:
    """Validate and reshape one raw CMS record.

    Args:
        data: The decoded record.
        resource_id: Names the CMS in errors when the record has no name.

    Raises:
        InvalidVocabularyError: a license or category token is unknown,
            or the list is empty.
        InvalidCmsRecordError: license, category or properties is missing,
            or a field is missing or mistyped. Chained from the KeyError,
            TypeError, AttributeError or pydantic.ValidationError.
    """
    name = data.get("name") if isinstance(data, Mapping) else None
    try:
        return _build_cms(data, name)
    except CmsDataError:
        raise
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise InvalidCmsRecordError(name or resource_id, exc) from exc
