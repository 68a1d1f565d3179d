"""Tests for domain model validation and serialization."""

import pytest
from pydantic import TypeAdapter, ValidationError

from cms_comparison.models.cms import (
    BooleanCmsProperty,
    CategoryCmsProperty,
    Cms,
    CmsList,
    CmsProperty,
)
from cms_comparison.models.common import PropertyType
from cms_comparison.models.state import BasicField, CategoryField, ScoreField

_property_adapter = TypeAdapter(CmsProperty)
_field_adapter = TypeAdapter(BasicField)


def _cms_payload(**overrides: object) -> dict:
    payload = {
        "name": "Strapi",
        "version": "4.15",
        "inception": "2015",
        "lastUpdated": "2023-11-02",
        "gitHubURL": "https://github.com/strapi/strapi",
        "teaser": "t",
        "systemRequirements": "s",
        "specialFeatures": "f",
        "license": ["MIT"],
        "category": ["Open Source"],
        "properties": {},
    }
    payload.update(overrides)
    return payload


class TestCmsModel:
    """Cms round-trips through its camelCase JSON form."""

    def test_validates_from_aliases(self) -> None:
        cms = Cms.model_validate(_cms_payload())
        assert cms.git_hub_url == "https://github.com/strapi/strapi"
        assert cms.last_updated == "2023-11-02"

    def test_rejects_unknown_license(self) -> None:
        with pytest.raises(ValidationError):
            Cms.model_validate(_cms_payload(license=["WTFPL"]))

    def test_rejects_empty_category(self) -> None:
        with pytest.raises(ValidationError):
            Cms.model_validate(_cms_payload(category=[]))

    def test_properties_round_trip(self) -> None:
        cms = Cms.model_validate(_cms_payload(properties={
            "rest": {"type": "Boolean", "name": "REST", "value": True},
            "i18n": {
                "type": "Category",
                "name": "Localization",
                "subProperties": {"assets": {"type": "Boolean", "name": "Assets"}},
            },
        }))
        dumped = cms.model_dump(by_alias=True, mode="json")
        assert Cms.model_validate(dumped) == cms
        assert isinstance(cms.properties["i18n"], CategoryCmsProperty)


class TestPropertyUnion:
    """The 'type' tag selects leaf or group."""

    def test_boolean_tag(self) -> None:
        prop = _property_adapter.validate_python({"type": "Boolean", "name": "A"})
        assert isinstance(prop, BooleanCmsProperty)
        assert prop.value is None

    def test_category_tag(self) -> None:
        prop = _property_adapter.validate_python({"type": "Category", "name": "G"})
        assert isinstance(prop, CategoryCmsProperty)
        assert prop.type == PropertyType.CATEGORY

    def test_unknown_tag(self) -> None:
        with pytest.raises(ValidationError):
            _property_adapter.validate_python({"type": "Score", "name": "A"})

    def test_category_item_access(self) -> None:
        leaf = BooleanCmsProperty(name="Assets", value=False)
        group = CategoryCmsProperty(name="G", sub_properties={"assets": leaf})
        assert group["assets"] is leaf
        with pytest.raises(KeyError):
            group["missing"]


class TestBasicFieldUnion:
    def test_score_tag(self) -> None:
        assert isinstance(_field_adapter.validate_python({"type": "Score", "name": "A"}), ScoreField)

    def test_category_tag(self) -> None:
        field = _field_adapter.validate_python({"type": "Category", "name": "G"})
        assert isinstance(field, CategoryField)
        assert field.sub_fields == {}


class TestCmsList:
    def test_valid_manifest(self) -> None:
        manifest = CmsList.model_validate({"fields": "fields", "cms": ["a", "b"]})
        assert manifest.cms == ["a", "b"]

    def test_missing_fields(self) -> None:
        with pytest.raises(ValidationError):
            CmsList.model_validate({"cms": []})
