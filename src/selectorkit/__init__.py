"""selectorkit: CSS selector builder plus small object and JSON helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.objects import Rectangle, from_json, get_json
from selectorkit.selector import (
    COMBINATORS,
    Category,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "SelectorKitConfig",
    "SelectorError",
    "DuplicateCategoryError",
    "OrderViolationError",
    "Rectangle",
    "get_json",
    "from_json",
    "COMBINATORS",
    "Category",
    "SelectorBuilder",
    "css_selector_builder",
]
