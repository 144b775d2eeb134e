"""Minimal tagquery entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokenizer import Tokenizer
from .treebuilder import TreeBuilder

if TYPE_CHECKING:
    from .node import Document, Element
    from .registry import TagRegistry
    from .selector import SelectorChain
    from .tokens import ParseError


class TagQuery:
    __slots__ = ("document", "errors", "tokenizer", "tree_builder")

    document: Document
    errors: list[ParseError]
    tokenizer: Tokenizer
    tree_builder: TreeBuilder

    def __init__(
        self,
        html: str | None,
        *,
        collect_errors: bool = False,
        registry: TagRegistry | None = None,
        tree_builder: TreeBuilder | None = None,
    ) -> None:
        self.tree_builder = tree_builder or TreeBuilder(registry=registry, collect_errors=collect_errors)
        self.tokenizer = Tokenizer(html or "")
        self.document = self.tree_builder.build(self.tokenizer)
        self.errors = self.tree_builder.errors

    @property
    def root(self) -> Element:
        return self.document.root

    def query(self, selector: str | SelectorChain) -> list[Element]:
        """Query the document with a descendant selector. Delegates to root.query()."""
        return self.root.query(selector)


def parse(html: str, registry: TagRegistry | None = None) -> Document:
    """Build and return the element tree for ``html``."""
    return TreeBuilder(registry=registry).build(Tokenizer(html))
