"""
Selectors package for building CSS selectors.

This package provides a fluent builder that assembles CSS selector strings
with ordering and uniqueness validation, a facade that starts new builders,
and heuristics for deriving and ranking selectors for HTML elements.
"""

from .builder import Category, SelectorBuilder
from .errors import (
    DUPLICATE_ERROR_MESSAGE,
    ORDER_ERROR_MESSAGE,
    DuplicateSingleton,
    OrderViolation,
    SelectorError,
)
from .facade import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,  # noqa: A001
    pseudo_class,
    pseudo_element,
)
from .selector_manager import SelectorManager

__version__ = "0.2.0"

# Export main classes
__all__ = [
    "Category",
    "SelectorBuilder",
    "SelectorManager",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    "ORDER_ERROR_MESSAGE",
    "DUPLICATE_ERROR_MESSAGE",
    "css_selector_builder",
    "element",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]
