"""Tests for license/category vocabulary checks."""

import pytest

from cms_comparison.models.common import Category, License
from cms_comparison.parsers.validation import (
    array_intersection,
    categories_are_valid,
    licenses_are_valid,
)


class TestArrayIntersection:
    """Intersection keeps the order and multiplicity of the second list."""

    def test_keeps_known_items_in_input_order(self) -> None:
        assert array_intersection(["a", "b", "c"], ["c", "x", "a"]) == ["c", "a"]

    def test_duplicates_kept(self) -> None:
        assert array_intersection(["a"], ["a", "a"]) == ["a", "a"]

    def test_empty_input(self) -> None:
        assert array_intersection(["a"], []) == []


class TestLicensesAreValid:
    """Every token must be a License value and the list non-empty."""

    @pytest.mark.parametrize(
        "licenses",
        [["MIT"], ["MIT", "Apache-2.0"], ["Proprietary", "GPL-3.0"], [m.value for m in License]],
    )
    def test_known_licenses(self, licenses: list[str]) -> None:
        assert licenses_are_valid(licenses) is True

    def test_one_unknown_token(self) -> None:
        assert licenses_are_valid(["MIT", "BogusLicense"]) is False

    def test_empty_list(self) -> None:
        assert licenses_are_valid([]) is False

    def test_empty_token(self) -> None:
        """An empty license field splits to [''] which is invalid."""
        assert licenses_are_valid("".split("/")) is False

    def test_duplicates_tolerated(self) -> None:
        assert licenses_are_valid(["MIT", "MIT"]) is True

    def test_order_irrelevant(self) -> None:
        assert licenses_are_valid(["Apache-2.0", "MIT"]) is True

    def test_case_sensitive(self) -> None:
        assert licenses_are_valid(["mit"]) is False

    def test_category_token_is_not_a_license(self) -> None:
        assert licenses_are_valid(["SaaS"]) is False


class TestCategoriesAreValid:
    """Every token must be a Category value and the list non-empty."""

    def test_known_categories(self) -> None:
        assert categories_are_valid(["Open Source", "On-Premises"]) is True

    def test_all_categories(self) -> None:
        assert categories_are_valid([m.value for m in Category]) is True

    def test_one_unknown_token(self) -> None:
        assert categories_are_valid(["SaaS", "Blockchain"]) is False

    def test_empty_list(self) -> None:
        assert categories_are_valid([]) is False
