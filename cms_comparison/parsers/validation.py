"""Vocabulary checks for license and category token lists."""

from collections.abc import Iterable, Sequence

from cms_comparison.models.common import Category, License


def array_intersection(reference: Iterable[str], items: Sequence[str]) -> list[str]:
    """Elements of ``items`` that also occur in ``reference``.

    Keeps the order and multiplicity of ``items``.
    """
    allowed = set(reference)
    return [item for item in items if item in allowed]


def _all_in_vocabulary(tokens: Sequence[str], vocabulary: Iterable[str]) -> bool:
    return len(tokens) > 0 and len(array_intersection(vocabulary, tokens)) == len(tokens)


def licenses_are_valid(licenses: Sequence[str]) -> bool:
    """True iff ``licenses`` is non-empty and every token is a known License."""
    return _all_in_vocabulary(licenses, (member.value for member in License))


def categories_are_valid(categories: Sequence[str]) -> bool:
    """True iff ``categories`` is non-empty and every token is a known Category."""
    return _all_in_vocabulary(categories, (member.value for member in Category))
