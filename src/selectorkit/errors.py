"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Category


class SelectorError(Exception):
    """Base error for all selector building failures."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateCategoryError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, message: str | None = None, **kwargs) -> None:
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            **kwargs,
        )


class OrderViolationError(SelectorError):
    """A selector part was appended after a part that must follow it."""

    def __init__(
        self,
        message: str | None = None,
        *,
        previous: Category | None = None,
        **kwargs,
    ) -> None:
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            **kwargs,
        )
        self.previous = previous
