from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .errors import generate_error_message
from .node import Document, Element
from .registry import TagRegistry
from .tokens import ParseError, TagToken

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .tokens import Token

logger = logging.getLogger(__name__)

_TAG_NAME_PATTERN = re.compile(r"^/?\s*([^\s/>]+)")
_ATTRIBUTE_PATTERN = re.compile(r"""([\w:-]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?""")
_TAG_WHITESPACE = " \t\r\n"


def extract_tag_name(tag_text: str) -> str:
    """Return the tag name of ``<div ...>``, ``</div>`` or ``<br/>``, or "" if there is none."""
    inner = tag_text.strip().lstrip("<").rstrip(">").strip()
    if inner.endswith("/"):
        inner = inner[:-1].strip()
    match = _TAG_NAME_PATTERN.match(inner)
    return match.group(1) if match else ""


def attribute_region(tag_text: str) -> str:
    """Return everything after the tag name, e.g. ``class="a" id=b`` for ``<p class="a" id=b>``."""
    inner = tag_text.strip().lstrip("<").rstrip(">").strip()
    for pos, ch in enumerate(inner):
        if ch in _TAG_WHITESPACE:
            return inner[pos + 1 :].strip()
    return ""


def parse_attributes(region: str) -> list[tuple[str, str]]:
    """Parse ``name``, ``name=value``, ``name="value"`` and ``name='value'`` pairs.

    Fragments that do not look like an attribute are skipped. Names keep
    their case; an attribute without a value gets "".
    """
    attributes: list[tuple[str, str]] = []
    for match in _ATTRIBUTE_PATTERN.finditer(region):
        name, double_quoted, single_quoted, bare = match.groups()
        if double_quoted is not None:
            value = double_quoted
        elif single_quoted is not None:
            value = single_quoted
        else:
            value = bare or ""
        attributes.append((name, value))
    return attributes


def clean_text(text: str) -> str:
    return text.replace("\r", "").replace("\n", "").strip()


class TreeBuilder:
    """Build an element tree from tokens, recovering from unbalanced tags.

    ``current`` is the element new children are attached to. A closing tag
    moves it to the parent of the nearest open element with that name and is
    ignored when there is none. Void and ``/>`` tags never become ``current``.
    """

    __slots__ = ("collect_errors", "current", "document", "errors", "registry")

    collect_errors: bool
    current: Element
    document: Document
    errors: list[ParseError]
    registry: TagRegistry

    def __init__(self, registry: TagRegistry | None = None, collect_errors: bool = False) -> None:
        self.registry = registry or TagRegistry.default()
        self.collect_errors = collect_errors
        self.errors = []
        self.document = Document()
        self.current = self.document.root

    def _parse_error(self, code: str, offset: int | None = None, tag_name: str | None = None) -> None:
        if not self.collect_errors:
            return
        message = generate_error_message(code, tag_name)
        self.errors.append(ParseError(code, offset=offset, tag_name=tag_name, message=message))

    def build(self, tokens: Iterable[Token]) -> Document:
        for token in tokens:
            self.process_token(token)
        return self.finish()

    def process_token(self, token: Token) -> None:
        if isinstance(token, TagToken):
            if not token.is_terminated:
                self._parse_error("eof-in-tag", token.start)
            if token.is_comment or token.is_declaration:
                return
            if token.is_end_tag:
                self._process_end_tag(token)
            else:
                self._process_start_tag(token)
            return
        self._process_text(token.text)

    def _process_end_tag(self, token: TagToken) -> None:
        name = extract_tag_name(token.text).lower()
        if not name:
            return
        node: Element | None = self.current
        while node is not None and node.name != name:
            node = node.parent
        if node is None or node.parent is None:
            self._parse_error("unexpected-end-tag", token.start, name)
            return
        if node is not self.current:
            self._parse_error("end-tag-too-early", token.start, name)
        self.current = node.parent

    def _process_start_tag(self, token: TagToken) -> None:
        name = extract_tag_name(token.text).lower()
        if not name:
            return
        if not self.registry.is_known_tag(name):
            self._parse_error("unknown-tag", token.start, name)

        element = self.document.create_element(name, self.current)
        for attr_name, value in parse_attributes(attribute_region(token.text)):
            element.attributes.append((attr_name, value))
            lowered = attr_name.lower()
            if lowered == "id":
                element.id = value
            elif lowered == "class":
                element.classes.extend(value.split())

        if not (token.self_closing or self.registry.is_void_tag(name)):
            self.current = element

    def _process_text(self, text: str) -> None:
        cleaned = clean_text(text)
        if not cleaned:
            return
        current = self.current
        if current.inner_text:
            current.inner_text = f"{current.inner_text} {cleaned}"
        else:
            current.inner_text = cleaned

    def finish(self) -> Document:
        node: Element | None = self.current
        while node is not None and node.parent is not None:
            self._parse_error("expected-closing-tag-but-got-eof", None, node.name)
            node = node.parent
        logger.debug("Built tree with %d element(s), %d parse error(s)", len(self.document) - 1, len(self.errors))
        return self.document
