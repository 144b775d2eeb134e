"""Split raw markup into tag and text tokens without building a tree."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .tokens import TagToken, TextToken

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .tokens import Token

# An unterminated "<" runs to the end of the input, so no character is ever
# dropped: joining every token's text gives back the original markup.
_TOKEN_PATTERN = re.compile(r"<[^>]*>?|[^<]+")


class Tokenizer:
    """A restartable, lazy sequence of tokens over one markup string.

    Every call to ``iter()`` starts a fresh scan from the beginning.
    """

    __slots__ = ("html",)

    html: str

    def __init__(self, html: str) -> None:
        self.html = html

    def __iter__(self) -> Iterator[Token]:
        for match in _TOKEN_PATTERN.finditer(self.html):
            text = match.group(0)
            if text[0] == "<":
                yield TagToken(text, match.start())
            else:
                yield TextToken(text, match.start())

    def __repr__(self) -> str:
        return f"Tokenizer({len(self.html)} chars)"


def tokenize(html: str) -> Iterator[Token]:
    """Yield the tokens of ``html`` in document order."""
    return iter(Tokenizer(html))
