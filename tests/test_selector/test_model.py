"""Tests for the selector category table."""

import pytest

from selectorkit.selector import COMBINATORS, Category


class TestRanks:
    def test_grammar_order(self):
        ordered = sorted(Category, key=lambda c: c.rank, reverse=True)
        assert ordered == [
            Category.ELEMENT,
            Category.ID,
            Category.CLASS,
            Category.ATTRIBUTE,
            Category.PSEUDO_CLASS,
            Category.PSEUDO_ELEMENT,
        ]

    def test_rank_values(self):
        assert Category.ELEMENT.rank == 6
        assert Category.PSEUDO_ELEMENT.rank == 1

    def test_from_rank(self):
        for category in Category:
            assert Category.from_rank(category.rank) is category

    def test_from_unknown_rank(self):
        with pytest.raises(ValueError):
            Category.from_rank(7)


class TestSingletons:
    def test_singletons(self):
        singles = {c for c in Category if c.is_singleton}
        assert singles == {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}


class TestRender:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.ELEMENT, "x"),
            (Category.ID, "#x"),
            (Category.CLASS, ".x"),
            (Category.ATTRIBUTE, "[x]"),
            (Category.PSEUDO_CLASS, ":x"),
            (Category.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_render(self, category, expected):
        assert category.render("x") == expected

    def test_values_are_strings(self):
        assert Category.PSEUDO_CLASS == "pseudo-class"


class TestCombinators:
    def test_css_combinators(self):
        assert COMBINATORS == (" ", "+", "~", ">")
