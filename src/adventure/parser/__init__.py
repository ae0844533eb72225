"""Parser module for adventure commands."""

from adventure.parser.lexer import apply_synonyms, normalize_synonyms, tokenize
from adventure.parser.parser import UNAVAILABLE_COMMAND, ParseError, ParseResult, parse

__all__ = [
    "UNAVAILABLE_COMMAND",
    "ParseError",
    "ParseResult",
    "apply_synonyms",
    "normalize_synonyms",
    "parse",
    "tokenize",
]
