"""Fluent, immutable CSS selector builder.

Each add operation returns a new builder; the receiver is never modified,
so a partially built selector can be branched and reused::

    base = css_selector_builder.element("a")
    base.pseudo_class("hover").stringify()   # 'a:hover'
    base.pseudo_class("focus").stringify()   # 'a:focus'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from selectorkit.errors import DuplicateCategoryError, OrderViolationError
from selectorkit.selector.model import Category

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


def _is_duplicate(used: tuple[int, ...], category: Category) -> bool:
    return category.is_singleton and category.rank in used


def _violates_order(used: tuple[int, ...], category: Category) -> bool:
    return any(rank < category.rank for rank in used)


@dataclass(frozen=True)
class SelectorBuilder:
    """A simple (or combined) selector under construction.

    Attributes:
        fragments: Rendered selector pieces in append order.
        used_categories: Ranks of the categories appended so far, in call order.
    """

    fragments: tuple[str, ...] = ()
    used_categories: tuple[int, ...] = ()

    # --- add operations -------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        """Validate *category* against the recorded ranks and append *value*."""
        if _is_duplicate(self.used_categories, category):
            logger.debug("Rejected duplicate %s %r", category, value)
            raise DuplicateCategoryError(category=category)
        if _violates_order(self.used_categories, category):
            previous = Category.from_rank(min(self.used_categories))
            logger.debug("Rejected %s %r after %s", category, value, previous)
            raise OrderViolationError(category=category, previous=previous)
        return SelectorBuilder(
            fragments=self.fragments + (category.render(value),),
            used_categories=self.used_categories + (category.rank,),
        )

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* into a fresh builder.

        The result holds one fragment and no category history, so none of
        the operands' ordering constraints carry over.
        """
        combined = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %s", combined)
        return SelectorBuilder(fragments=(combined,))

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(self.fragments)

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def __str__(self) -> str:
        return self.stringify()


css_selector_builder = SelectorBuilder()
