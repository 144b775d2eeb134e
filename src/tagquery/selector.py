# Descendant-selector compiler for tagquery
# Supports tag, #id and .class fragments joined by whitespace

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# A leading tag name, or an #id fragment, or a .class fragment. Characters
# matching none of these are skipped.
_FRAGMENT_PATTERN = re.compile(r"(^[a-zA-Z][\w:-]*)|#([\w:-]+)|\.([\w:-]+)")


class SelectorNode:
    """One descendant level of a compiled selector (e.g., div#main.item)."""

    __slots__ = ("classes", "id", "next", "tag_name")

    tag_name: str
    id: str
    classes: list[str]
    next: SelectorNode | None

    def __init__(self, tag_name: str = "", id: str = "", classes: list[str] | None = None) -> None:
        self.tag_name = tag_name
        self.id = id
        self.classes = classes or []
        self.next = None

    @property
    def is_universal(self) -> bool:
        """True when this level places no constraint at all."""
        return not (self.tag_name or self.id or self.classes)

    def __str__(self) -> str:
        cls = "".join(f".{c}" for c in self.classes)
        id_part = f"#{self.id}" if self.id else ""
        return f"{self.tag_name}{id_part}{cls}"

    def __repr__(self) -> str:
        return f"SelectorNode({str(self)!r})"


class SelectorChain:
    """A linked chain of ``SelectorNode`` levels, outermost first.

    Iterating always starts again from ``head``.
    """

    __slots__ = ("head",)

    head: SelectorNode | None

    def __init__(self, head: SelectorNode | None = None) -> None:
        self.head = head

    def __iter__(self) -> Iterator[SelectorNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self.head is not None

    def __str__(self) -> str:
        return " ".join(str(node) for node in self)

    def __repr__(self) -> str:
        return f"SelectorChain({str(self)!r})"


def parse_segment(segment: str) -> SelectorNode:
    """Compile one whitespace-free segment such as ``li.item.active``.

    Every ``.class`` fragment is kept (duplicates included). When a segment
    holds several ``#id`` fragments the last one wins, so ``#a#b`` has id
    ``b``.
    """
    node = SelectorNode()
    for match in _FRAGMENT_PATTERN.finditer(segment):
        tag_name, id_value, class_name = match.groups()
        if tag_name is not None:
            node.tag_name = tag_name
        elif id_value is not None:
            node.id = id_value
        else:
            node.classes.append(class_name)
    return node


def parse_selector(selector_string: str) -> SelectorChain:
    """Compile a selector string into a chain, one node per whitespace-separated segment.

    Empty and whitespace-only strings give an empty chain.
    """
    head: SelectorNode | None = None
    tail: SelectorNode | None = None
    for segment in selector_string.split():
        node = parse_segment(segment)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return SelectorChain(head)
