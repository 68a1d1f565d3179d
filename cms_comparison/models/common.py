"""Shared vocabulary enums and base models used across the CMS domain models."""

from enum import StrEnum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


# --- Closed vocabularies ---


class License(StrEnum):
    """Licenses a CMS entry may declare. Anything else is rejected."""

    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    BSD_2 = "BSD-2-Clause"
    BSD_3 = "BSD-3-Clause"
    GPL_2 = "GPL-2.0"
    GPL_3 = "GPL-3.0"
    LGPL_2_1 = "LGPL-2.1"
    LGPL_3 = "LGPL-3.0"
    AGPL_3 = "AGPL-3.0"
    MPL_2 = "MPL-2.0"
    EPL_2 = "EPL-2.0"
    ISC = "ISC"
    OSL_3 = "OSL-3.0"
    PROPRIETARY = "Proprietary"


class Category(StrEnum):
    """Product categories a CMS entry may declare."""

    OPEN_SOURCE = "Open Source"
    PROPRIETARY = "Proprietary"
    SAAS = "SaaS"
    ON_PREMISES = "On-Premises"
    HYBRID = "Hybrid"


class PropertyType(StrEnum):
    """Type tag of a parsed property or filter field."""

    BOOLEAN = "Boolean"
    CATEGORY = "Category"
    SCORE = "Score"
    SPECIAL = "Special"


class ScoreValue(StrEnum):
    """How much a user cares about a property when filtering."""

    DONT_CARE = "n.a."
    NICE_TO_HAVE = "nice-to-have"
    REQUIRED = "required"


# Keys of a grouped property / category field that are not sub-entries.
RESERVED_KEYS: frozenset[str] = frozenset({"name", "description"})


# --- Base model ---


class CmsComparisonBase(BaseModel):
    """Base model for all domain models.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "protected_namespaces": (),
    }
