"""Selector model: the six fragment categories and their grammar rank.

Rank values (lower rank = later in the selector):
    6 = element
    5 = id
    4 = class
    3 = attribute
    2 = pseudo-class
    1 = pseudo-element
"""

from __future__ import annotations

from enum import StrEnum

# Informational only; combine() does not validate its combinator.
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class Category(StrEnum):
    """Kind of fragment a simple selector is built from."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        """True for categories allowed at most once per simple selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Return *value* wrapped in this category's syntax."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_rank(cls, rank: int) -> Category:
        for category, category_rank in _RANKS.items():
            if category_rank == rank:
                return category
        raise ValueError(f"Unknown category rank: {rank!r}")


_RANKS: dict[Category, int] = {
    Category.ELEMENT: 6,
    Category.ID: 5,
    Category.CLASS: 4,
    Category.ATTRIBUTE: 3,
    Category.PSEUDO_CLASS: 2,
    Category.PSEUDO_ELEMENT: 1,
}

_SINGLETONS: frozenset[Category] = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
