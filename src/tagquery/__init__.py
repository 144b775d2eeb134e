from .errors import FetchError, InvalidArgumentError, TagQueryError
from .node import Document, Element
from .parser import TagQuery, parse
from .query import QueryEngine, matches, query
from .registry import TagRegistry
from .selector import SelectorChain, SelectorNode, parse_selector
from .tokenizer import Tokenizer, tokenize
from .tokens import ParseError, TagToken, TextToken
from .treebuilder import TreeBuilder

__all__ = [
    "Document",
    "Element",
    "FetchError",
    "InvalidArgumentError",
    "ParseError",
    "QueryEngine",
    "SelectorChain",
    "SelectorNode",
    "TagQuery",
    "TagQueryError",
    "TagRegistry",
    "TagToken",
    "TextToken",
    "Tokenizer",
    "TreeBuilder",
    "matches",
    "parse",
    "parse_selector",
    "query",
    "tokenize",
]
