"""
parser.py

PURPOSE: Parse resolved tokens into Command objects.
DEPENDENCIES: command model, world model

ARCHITECTURE NOTES:
The grammar is deliberately small:
    COMMAND := VERB [OBJECT]

The verb must be registered and the optional second word must name an
object that exists somewhere in the world. Where the object currently is
is not the parser's concern - the command handlers decide that.
Any other shape of input is rejected with a single message.
"""

from collections.abc import Container
from dataclasses import dataclass

from adventure.models.command import Command
from adventure.models.world import World

UNAVAILABLE_COMMAND = "Unavailable command"


@dataclass
class ParseError:
    """Represents a parsing error with a user-friendly message."""

    message: str
    raw_input: str


@dataclass
class ParseResult:
    """Result of parsing - either a Command or an error."""

    command: Command | None
    error: ParseError | None

    @property
    def success(self) -> bool:
        return self.command is not None

    @classmethod
    def ok(cls, command: Command) -> "ParseResult":
        return cls(command=command, error=None)

    @classmethod
    def fail(cls, message: str, raw_input: str) -> "ParseResult":
        return cls(command=None, error=ParseError(message, raw_input))


def parse(
    tokens: list[str],
    verbs: Container[str],
    world: World,
    raw_input: str = "",
) -> ParseResult:
    """
    Parse tokens into a Command.

    Args:
        tokens: Upper-case tokens with synonyms already applied
        verbs: Registered verb names
        world: World used to check the object argument
        raw_input: Original line, kept on the command for reporting

    Returns:
        ParseResult containing either a Command or an error
    """
    if not tokens or tokens[0] not in verbs:
        return ParseResult.fail(UNAVAILABLE_COMMAND, raw_input)

    verb = tokens[0]

    if len(tokens) == 1:
        return ParseResult.ok(Command(verb=verb, raw_input=raw_input))

    if len(tokens) == 2:
        obj = world.object_by_name(tokens[1])
        if obj is not None:
            return ParseResult.ok(Command(verb=verb, object_name=obj.name, raw_input=raw_input))

    return ParseResult.fail(UNAVAILABLE_COMMAND, raw_input)
