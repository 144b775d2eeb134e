from __future__ import annotations

from typing import Literal


class Token:
    """One lexical unit of markup: the raw text plus where it starts."""

    __slots__ = ("start", "text")

    TAG: Literal[0] = 0
    TEXT: Literal[1] = 1

    kind: int
    start: int
    text: str

    def __init__(self, text: str, start: int = 0) -> None:
        self.text = text
        self.start = start

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r}, start={self.start})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return type(self) is type(other) and self.text == other.text and self.start == other.start

    __hash__ = None  # type: ignore[assignment]


class TagToken(Token):
    """Everything from ``<`` up to and including the next ``>``."""

    __slots__ = ()

    kind = Token.TAG

    @property
    def is_comment(self) -> bool:
        return self.text.startswith("<!--")

    @property
    def is_declaration(self) -> bool:
        return self.text.startswith("<!")

    @property
    def is_end_tag(self) -> bool:
        return self.text.startswith("</")

    @property
    def is_terminated(self) -> bool:
        return self.text.endswith(">")

    @property
    def self_closing(self) -> bool:
        return self.text.endswith("/>")


class TextToken(Token):
    """A maximal run of characters containing no ``<``."""

    __slots__ = ()

    kind = Token.TEXT


class ParseError:
    """Represents a recovered parse problem with its source offset."""

    __slots__ = ("code", "message", "offset", "tag_name")

    code: str
    offset: int | None
    tag_name: str | None
    message: str

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(
        self,
        code: str,
        offset: int | None = None,
        tag_name: str | None = None,
        message: str | None = None,
    ) -> None:
        self.code = code
        self.offset = offset
        self.tag_name = tag_name
        self.message = message or code

    def __repr__(self) -> str:
        if self.offset is not None:
            return f"ParseError({self.code!r}, offset={self.offset})"
        return f"ParseError({self.code!r})"

    def __str__(self) -> str:
        prefix = f"({self.offset}): " if self.offset is not None else ""
        if self.message != self.code:
            return f"{prefix}{self.code} - {self.message}"
        return f"{prefix}{self.code}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.offset == other.offset and self.tag_name == other.tag_name
