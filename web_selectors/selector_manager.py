"""
SelectorManager: lightweight selector heuristics built on SelectorBuilder.
"""

import logging
from typing import Dict, List, Optional, Union

import soupsieve as sv
from bs4 import Tag

from .builder import SelectorBuilder
from .facade import element

logger = logging.getLogger(__name__)

AttrValue = Union[str, List[str]]


class SelectorManager:
    def rank_selectors(self, candidates: List[SelectorBuilder]) -> List[SelectorBuilder]:
        # Most specific first; ties keep their input order
        ranked = sorted(candidates, key=lambda c: c.specificity(), reverse=True)
        logger.debug("Ranked selectors: %s", [c.stringify() for c in ranked])
        return ranked

    def choose_best(self, candidates: List[SelectorBuilder]) -> Optional[SelectorBuilder]:
        ranked = self.rank_selectors(candidates)
        return ranked[0] if ranked else None

    def builder_from_attrs(self, tag: str, attrs: Dict[str, AttrValue]) -> SelectorBuilder:
        """
        Build a selector for an element from its tag name and attributes.

        The most reliable attribute wins: a non-empty id, then data-*,
        aria-label, name, classes, and finally whatever attribute comes first.
        Identifiers and quoted values are CSS-escaped.
        """
        builder = element(tag)
        if _as_text(attrs.get("id", "")):
            return builder.id(sv.escape(_as_text(attrs["id"])))
        for k in attrs:
            if k.startswith("data-"):
                return builder.attr(_attr_equals(k, attrs[k]))
        for k in ("aria-label", "name"):
            if k in attrs:
                return builder.attr(_attr_equals(k, attrs[k]))
        if "class" in attrs:
            classes = attrs["class"]
            if isinstance(classes, str):
                classes = classes.split()
            for cls in classes:
                builder.class_(sv.escape(cls))
            if classes:
                return builder
        others = [k for k in attrs if k != "class"]
        if others:
            return builder.attr(_attr_equals(others[0], attrs[others[0]]))
        return builder

    def generate_selector_from_attrs(self, tag: str, attrs: Dict[str, AttrValue]) -> str:
        return self.builder_from_attrs(tag, attrs).stringify()

    def selector_for_element(self, node: Tag) -> str:
        """Selector for a parsed BeautifulSoup element."""
        return self.generate_selector_from_attrs(node.name, dict(node.attrs))


def _as_text(value: AttrValue) -> str:
    # bs4 returns multi-valued attributes (class, rel, ...) as lists
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def _attr_equals(name: str, value: AttrValue) -> str:
    quoted = _as_text(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\a ")
    return f"{sv.escape(name)}='{quoted}'"
