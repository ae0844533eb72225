"""
command.py

PURPOSE: Define the Command model and the built-in verb names.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
Commands represent fully parsed player input. The parser produces Command
objects and the engine consumes them. Verbs stay plain strings because
direction verbs are discovered from the world's exit tables at load time;
the built-in ones are listed in the Verb enum.
"""

from dataclasses import dataclass
from enum import Enum


class Verb(str, Enum):
    """Built-in verbs, in the order HELP lists them."""

    DROP = "DROP"
    HELP = "HELP"
    INVENTORY = "INVENTORY"
    LOOK = "LOOK"
    TAKE = "TAKE"
    QUIT = "QUIT"


BUILTIN_VERBS: tuple[str, ...] = tuple(verb.value for verb in Verb)


@dataclass(frozen=True)
class Command:
    """
    A fully parsed player command.

    Examples:
        - NORTH -> Command(verb="NORTH")
        - TAKE KEYS -> Command(verb="TAKE", object_name="KEYS")

    Attributes:
        verb: Canonical verb token (after synonym substitution)
        object_name: Name of a known object, if one was given
        raw_input: The original player input string
    """

    verb: str
    object_name: str | None = None
    raw_input: str = ""
