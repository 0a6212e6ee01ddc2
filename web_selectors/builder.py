"""
SelectorBuilder: fluent construction of CSS selector strings.

A compound selector is made of typed parts that must follow the order

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class parts may repeat. Two built
selectors can be joined with a combinator (' ', '+', '~', '>').
"""

import logging
from enum import Enum
from typing import Dict, Optional, Set, Tuple

from .errors import DuplicateSingleton, OrderViolation

logger = logging.getLogger(__name__)


class Category(Enum):
    # name = (position, prefix, suffix, singleton)
    ELEMENT = (0, "", "", True)
    ID = (1, "#", "", True)
    CLASS = (2, ".", "", False)
    ATTRIBUTE = (3, "[", "]", False)
    PSEUDO_CLASS = (4, ":", "", False)
    PSEUDO_ELEMENT = (5, "::", "", True)

    def __init__(self, position: int, prefix: str, suffix: str, singleton: bool):
        self.position = position
        self.prefix = prefix
        self.suffix = suffix
        self.singleton = singleton

    def format(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


# Specificity column (a, b, c) each category contributes to.
_SPECIFICITY_COLUMN = {
    Category.ID: 0,
    Category.CLASS: 1,
    Category.ATTRIBUTE: 1,
    Category.PSEUDO_CLASS: 1,
    Category.ELEMENT: 2,
    Category.PSEUDO_ELEMENT: 2,
}


class SelectorBuilder:
    def __init__(self):
        self.text = ""
        self.last_category: Optional[Category] = None
        self.seen: Set[Category] = set()
        self.counts: Dict[Category, int] = {}
        self._combined: Optional[Tuple[int, int, int]] = None

    def _add(self, category: Category, value: str) -> "SelectorBuilder":
        if category.singleton and category in self.seen:
            logger.debug("Rejected second %s part %r in %r", category.name, value, self.text)
            raise DuplicateSingleton()
        if self.last_category is not None and category.position < self.last_category.position:
            logger.debug(
                "Rejected %s part %r after %s in %r",
                category.name, value, self.last_category.name, self.text,
            )
            raise OrderViolation()

        self.seen.add(category)
        self.last_category = category
        self.counts[category] = self.counts.get(category, 0) + 1
        self.text += category.format(value)
        return self

    def element(self, value: str) -> "SelectorBuilder":
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self._add(Category.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self._add(Category.PSEUDO_ELEMENT, value)

    def combine(self, left, combinator: str, right) -> "SelectorBuilder":
        """
        Join two built selectors as ``left <combinator> right``.

        The combinator is inserted verbatim, padded with one space on each side,
        so the descendant combinator ' ' yields three spaces.
        Parts appended afterwards count on top of the two operands in
        specificity(); an operand without specificity() counts as (0, 0, 0).
        """
        self.text = f"{left.stringify()} {combinator} {right.stringify()}"
        self.seen = set()
        self.last_category = None
        self.counts = {}
        self._combined = tuple(
            l + r for l, r in zip(_specificity_of(left), _specificity_of(right))
        )
        logger.debug("Combined selector: %s", self.text)
        return self

    def specificity(self) -> Tuple[int, int, int]:
        """Return the CSS specificity (ids, classes/attrs/pseudo-classes, elements/pseudo-elements)."""
        score = list(self._combined or (0, 0, 0))
        for category, count in self.counts.items():
            score[_SPECIFICITY_COLUMN[category]] += count
        return tuple(score)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.text!r})"


def _specificity_of(selector) -> Tuple[int, int, int]:
    if hasattr(selector, "specificity"):
        return selector.specificity()
    return (0, 0, 0)
