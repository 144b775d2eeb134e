"""Tag-name lookups used while building the tree.

A ``TagRegistry`` is an ordinary value: construct one (or load one from JSON
files) and hand it to the tree builder. When no data is supplied the built-in
lists below are used, so void-tag detection keeps working without any
configuration.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_KNOWN_TAGS: frozenset[str] = frozenset(
    {
        "html",
        "head",
        "body",
        "div",
        "span",
        "p",
        "a",
        "img",
        "ul",
        "ol",
        "li",
        "br",
        "meta",
        "input",
        "form",
        "label",
        "section",
        "article",
        "nav",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "script",
        "style",
    }
)

DEFAULT_VOID_TAGS: frozenset[str] = frozenset({"br", "img", "meta", "input", "link", "hr"})


def _normalize(names: Iterable[str] | None) -> frozenset[str]:
    if not names:
        return frozenset()
    return frozenset(name.lower() for name in names if name)


def _load_name_list(path: str | Path | None) -> list[str] | None:
    if path is None:
        return None
    path = Path(path)
    if not path.exists():
        logger.debug("Tag list %s not found, using built-in list", path)
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not load tag list %s (%s), using built-in list", path, e)
        return None
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        logger.warning("Tag list %s is not a JSON array of strings, using built-in list", path)
        return None
    return data


class TagRegistry:
    """Answers "is this a known element" and "is this a void element"."""

    __slots__ = ("known_tags", "void_tags")

    known_tags: frozenset[str]
    void_tags: frozenset[str]

    def __init__(
        self,
        known_tags: Iterable[str] | None = None,
        void_tags: Iterable[str] | None = None,
    ) -> None:
        self.known_tags = _normalize(known_tags) or DEFAULT_KNOWN_TAGS
        self.void_tags = _normalize(void_tags) or DEFAULT_VOID_TAGS

    @classmethod
    def default(cls) -> TagRegistry:
        return cls()

    @classmethod
    def from_json_files(
        cls,
        tags_path: str | Path | None = None,
        void_tags_path: str | Path | None = None,
    ) -> TagRegistry:
        """Load both lists from JSON arrays of strings.

        Each half falls back to its built-in list independently when its file
        is missing, unreadable or malformed.
        """
        return cls(_load_name_list(tags_path), _load_name_list(void_tags_path))

    def is_known_tag(self, name: str) -> bool:
        return name.lower() in self.known_tags

    def is_void_tag(self, name: str) -> bool:
        return name.lower() in self.void_tags

    def __repr__(self) -> str:
        return f"TagRegistry(known_tags={len(self.known_tags)}, void_tags={sorted(self.void_tags)!r})"
