"""Evaluate compiled descendant selectors against an element tree."""

from __future__ import annotations

import logging
from itertools import islice
from typing import TYPE_CHECKING

from .errors import InvalidArgumentError
from .selector import SelectorChain, parse_selector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .node import Element
    from .selector import SelectorNode

logger = logging.getLogger(__name__)


def node_matches(element: Element, node: SelectorNode) -> bool:
    """Check one element against one selector level.

    The tag compares case-insensitively, the id exactly, and every class of
    the node must be present on the element (extra classes are fine).
    """
    if node.tag_name and node.tag_name.lower() != element.name.lower():
        return False
    if node.id and node.id != element.id:
        return False
    if node.classes:
        element_classes = set(element.classes)
        for class_name in node.classes:
            if class_name not in element_classes:
                return False
    return True


class QueryEngine:
    """Resolves a selector chain level by level over breadth-first walks."""

    __slots__ = ()

    def select(self, root: Element | None, chain: SelectorChain) -> list[Element]:
        if root is None:
            raise InvalidArgumentError("Cannot query a missing root element")

        levels = iter(chain)
        first = next(levels, None)
        if first is None:
            return []

        # The first level scans the whole tree, root included
        candidates = self._unique(e for e in root.descendants() if node_matches(e, first))

        for node in levels:
            if not candidates:
                break
            found: list[Element] = []
            for match in candidates:
                # Deeper levels start at the match's children
                for descendant in islice(match.descendants(), 1, None):
                    if node_matches(descendant, node):
                        found.append(descendant)
            candidates = self._unique(found)

        logger.debug("Selector %r matched %d element(s)", str(chain), len(candidates))
        return candidates

    def matches(self, element: Element, chain: SelectorChain) -> bool:
        """Check whether ``element`` would appear in a query for ``chain`` from its root."""
        nodes = list(chain)
        if not nodes or not node_matches(element, nodes[-1]):
            return False
        # Walk the remaining levels outward through the ancestors
        remaining = nodes[:-1]
        for ancestor in element.ancestors():
            if not remaining:
                break
            if node_matches(ancestor, remaining[-1]):
                remaining.pop()
        return not remaining

    @staticmethod
    def _unique(elements: Iterable[Element]) -> list[Element]:
        seen: dict[int, Element] = {}
        for element in elements:
            seen.setdefault(element.index, element)
        return list(seen.values())


# Global engine instance
_engine: QueryEngine = QueryEngine()


def _compile(selector: str | SelectorChain) -> SelectorChain:
    if isinstance(selector, SelectorChain):
        return selector
    return parse_selector(selector)


def query(root: Element | None, selector: str | SelectorChain) -> list[Element]:
    """
    Query the tree below ``root`` (root included) with a descendant selector.

    Args:
        root: The element to search from
        selector: A selector string or an already compiled chain

    Returns:
        A list of distinct matching elements; order carries no meaning

    Raises:
        InvalidArgumentError: If root is None
    """
    return _engine.select(root, _compile(selector))


def matches(element: Element | None, selector: str | SelectorChain) -> bool:
    """
    Check if an element matches a descendant selector.

    Args:
        element: The element to check
        selector: A selector string or an already compiled chain

    Returns:
        True if the element matches, False otherwise
    """
    if element is None:
        raise InvalidArgumentError("Cannot match a missing element")
    return _engine.matches(element, _compile(selector))
