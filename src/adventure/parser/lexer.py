"""
lexer.py

PURPOSE: Tokenize player input and apply the synonym table.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The lexer converts a raw input line into upper-case word tokens.
Synonyms are applied once per token: an alias is replaced by its
canonical word and the result is not looked up again.
"""

from collections.abc import Mapping


def tokenize(text: str) -> list[str]:
    """
    Convert an input line into a list of tokens.

    Args:
        text: Raw player input

    Returns:
        Upper-cased, whitespace-separated words (empty for blank input)
    """
    return text.strip().upper().split()


def normalize_synonyms(synonyms: Mapping[str, str]) -> dict[str, str]:
    """Upper-case both sides of a synonym table."""
    return {
        alias.strip().upper(): canonical.strip().upper() for alias, canonical in synonyms.items()
    }


def apply_synonyms(tokens: list[str], synonyms: Mapping[str, str]) -> list[str]:
    """
    Replace every token that is an alias with its canonical word.

    Args:
        tokens: Upper-case tokens from tokenize()
        synonyms: Upper-case alias -> canonical mapping

    Returns:
        New token list after a single substitution pass
    """
    return [synonyms.get(token, token) for token in tokens]
