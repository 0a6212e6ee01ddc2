"""
Errors raised while building selectors.
"""

from typing import Optional

ORDER_ERROR_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_ERROR_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)


class SelectorError(ValueError):
    """Base class for selector construction failures."""

    message = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class OrderViolation(SelectorError):
    message = ORDER_ERROR_MESSAGE


class DuplicateSingleton(SelectorError):
    message = DUPLICATE_ERROR_MESSAGE
