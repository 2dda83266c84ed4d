from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.model import COMBINATORS, Category

__all__ = ["SelectorBuilder", "css_selector_builder", "Category", "COMBINATORS"]
