from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from .query import node_matches, query

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .selector import SelectorChain, SelectorNode

ROOT_NAME = "document"


class Element:
    """One markup element stored in a ``Document`` arena.

    Parent and children are kept as arena indices; ``parent`` and
    ``children`` resolve them through the owning document. Two elements are
    only ever equal when they are the same object, and ``index`` is unique
    within their document.
    """

    __slots__ = (
        "attributes",
        "child_indices",
        "classes",
        "document",
        "id",
        "index",
        "inner_text",
        "name",
        "parent_index",
    )

    attributes: list[tuple[str, str]]
    child_indices: list[int]
    classes: list[str]
    document: Document
    id: str
    index: int
    inner_text: str
    name: str
    parent_index: int | None

    def __init__(self, document: Document, index: int, name: str, parent_index: int | None = None) -> None:
        self.document = document
        self.index = index
        self.name = name
        self.parent_index = parent_index
        self.id = ""
        self.classes = []
        self.attributes = []
        self.inner_text = ""
        self.child_indices = []

    @property
    def parent(self) -> Element | None:
        if self.parent_index is None:
            return None
        return self.document.elements[self.parent_index]

    @property
    def children(self) -> list[Element]:
        elements = self.document.elements
        return [elements[i] for i in self.child_indices]

    def has_child_nodes(self) -> bool:
        """Return True if this element has children."""
        return bool(self.child_indices)

    def descendants(self) -> Iterator[Element]:
        """Yield this element, then its children, grandchildren and so on (breadth-first)."""
        elements = self.document.elements
        pending = deque([self.index])
        while pending:
            current = elements[pending.popleft()]
            yield current
            pending.extend(current.child_indices)

    def ancestors(self) -> Iterator[Element]:
        """Yield the parent, grandparent and so on up to the document root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the last attribute called ``name`` (case-insensitive)."""
        wanted = name.lower()
        for attr_name, value in reversed(self.attributes):
            if attr_name.lower() == wanted:
                return value
        return default

    def has_class(self, class_name: str) -> bool:
        return class_name in self.classes

    def matches(self, node: SelectorNode) -> bool:
        """Check this element against one compiled selector level."""
        return node_matches(self, node)

    def query(self, selector: str | SelectorChain) -> list[Element]:
        """
        Query the tree below (and including) this element with a descendant selector.

        Args:
            selector: A selector string such as ``"div#main .item"`` or a compiled chain

        Returns:
            A list of distinct matching elements
        """
        result: list[Element] = query(self, selector)
        return result

    def __str__(self) -> str:
        id_part = f' id="{self.id}"' if self.id else ""
        class_part = f' class="{" ".join(self.classes)}"' if self.classes else ""
        return f"<{self.name}{id_part}{class_part}>"

    def __repr__(self) -> str:
        return f"Element({self.index}, {str(self)!r})"


class Document:
    """The arena owning every element of one parsed tree.

    Element 0 is the synthetic root named ``document``.
    """

    __slots__ = ("elements",)

    elements: list[Element]

    def __init__(self) -> None:
        self.elements = [Element(self, 0, ROOT_NAME)]

    @property
    def root(self) -> Element:
        return self.elements[0]

    def create_element(self, name: str, parent: Element) -> Element:
        """Create ``name`` as the last child of ``parent`` and return it."""
        element = Element(self, len(self.elements), name, parent.index)
        self.elements.append(element)
        parent.child_indices.append(element.index)
        return element

    def query(self, selector: str | SelectorChain) -> list[Element]:
        """Query the whole tree. Delegates to root.query()."""
        return self.root.query(selector)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __repr__(self) -> str:
        return f"Document({len(self.elements)} elements)"
