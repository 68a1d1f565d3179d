"""CMS entry models.

A CMS entry carries identity fields, validated license and category lists,
and a property map whose values are either a single tri-state property or a
named group of them.
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from cms_comparison.models.common import (
    Category,
    CmsComparisonBase,
    License,
    PropertyType,
)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class BooleanCmsProperty(CmsComparisonBase):
    """Leaf property: yes/no/unknown plus an optional free-text note."""

    type: Literal[PropertyType.BOOLEAN] = PropertyType.BOOLEAN
    name: str
    description: str | None = None
    value: bool | None = None
    info: str | None = None


class CategoryCmsProperty(CmsComparisonBase):
    """Grouped property: a named set of leaf properties keyed by sub-key."""

    type: Literal[PropertyType.CATEGORY] = PropertyType.CATEGORY
    name: str
    description: str | None = None
    sub_properties: dict[str, BooleanCmsProperty] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> BooleanCmsProperty:
        return self.sub_properties[key]


CmsProperty = Annotated[
    BooleanCmsProperty | CategoryCmsProperty,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# CMS entry
# ---------------------------------------------------------------------------


class Cms(CmsComparisonBase):
    """One comparison subject, parsed and validated."""

    name: str
    version: str
    inception: str
    last_updated: str
    git_hub_url: str = Field(alias="gitHubURL")
    teaser: str
    system_requirements: str
    special_features: str
    license: list[License] = Field(..., min_length=1)
    category: list[Category] = Field(..., min_length=1)
    properties: dict[str, CmsProperty] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Manifest and aggregate result
# ---------------------------------------------------------------------------


class CmsList(CmsComparisonBase):
    """The manifest: field-metadata resource id plus one id per CMS."""

    fields: str = Field(..., min_length=1)
    cms: list[str]


class ReceivedCmsData(CmsComparisonBase):
    """Field metadata and parsed CMS entries keyed by resource id."""

    fields: dict[str, Any]
    cms: dict[str, Cms]
