"""Exception types and human-readable messages for parse errors.

The tree builder never raises on malformed markup. When error collection is
enabled it records ``ParseError`` entries whose codes are described here.
"""

from __future__ import annotations


class TagQueryError(Exception):
    """Base class for all tagquery exceptions."""


class InvalidArgumentError(TagQueryError, ValueError):
    """Raised when a caller breaks an API contract, e.g. querying a missing root."""


class FetchError(TagQueryError, OSError):
    """Raised when markup could not be loaded from a remote source."""

    url: str

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Could not load {url}: {reason}")


def generate_error_message(code: str, tag_name: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        tag_name: Optional tag name to include in the message for context

    Returns:
        Human-readable error message string
    """
    messages = {
        "eof-in-tag": "Unexpected end of file in tag",
        "unexpected-end-tag": f"Unexpected </{tag_name}> end tag with no open element to close",
        "end-tag-too-early": f"</{tag_name}> end tag closed early (unclosed children)",
        "unknown-tag": f"Unknown <{tag_name}> tag",
        "expected-closing-tag-but-got-eof": f"Expected </{tag_name}> closing tag but reached end of file",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)
