"""Filter field and application state models.

The application state is the snapshot handed to the UI layer at startup.
Filter fields are kept twice: a ``current`` set the UI mutates and an
``untouched`` deep copy used to reset filters.
"""

from typing import Annotated, Literal

from pydantic import Field

from cms_comparison.models.cms import Cms
from cms_comparison.models.common import (
    CmsComparisonBase,
    PropertyType,
    ScoreValue,
)

SHOW_ALL = "Show All"


# ---------------------------------------------------------------------------
# Filter fields
# ---------------------------------------------------------------------------


class ScoreField(CmsComparisonBase):
    """A filterable property with the user's current preference."""

    type: Literal[PropertyType.SCORE] = PropertyType.SCORE
    name: str
    description: str | None = None
    value: ScoreValue = ScoreValue.DONT_CARE


class CategoryField(CmsComparisonBase):
    """A named group of score fields."""

    type: Literal[PropertyType.CATEGORY] = PropertyType.CATEGORY
    name: str
    description: str | None = None
    sub_fields: dict[str, ScoreField] = Field(default_factory=dict)


BasicField = Annotated[ScoreField | CategoryField, Field(discriminator="type")]


class SpecialField(CmsComparisonBase):
    """Multi-select filter over a closed vocabulary (licenses, categories)."""

    type: Literal[PropertyType.SPECIAL] = PropertyType.SPECIAL
    name: str
    description: str | None = None
    values: list[str] = Field(default_factory=list)
    possible_values: list[str] = Field(default_factory=list)


class FilterFieldSet(CmsComparisonBase):
    basic: dict[str, BasicField] = Field(default_factory=dict)
    special: dict[str, SpecialField] = Field(default_factory=dict)


class FilterFields(CmsComparisonBase):
    current: FilterFieldSet
    untouched: FilterFieldSet
    active_preset: str = SHOW_ALL


class FilterResult(CmsComparisonBase):
    """Outcome of matching one CMS against the current filter fields.

    Shares are -1 while no filter has been applied.
    """

    cms_key: str
    satisfactory: bool
    has_required_share: float = -1
    has_nice_to_have_share: float = -1


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------


class AppState(CmsComparisonBase):
    cms: dict[str, Cms]
    filter_fields: FilterFields
    filter_results: list[FilterResult]
    show_aside: bool = False
    cookies_accepted: bool = False
