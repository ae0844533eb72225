"""
commands.py

PURPOSE: Command behaviours and the registry that maps verbs to them.
DEPENDENCIES: models, actions, motion

ARCHITECTURE NOTES:
Every verb the player can type is a CommandBehavior with one method,
execute(world, state, object_name). The registry holds:
- the fixed built-ins (DROP, HELP, INVENTORY, LOOK, TAKE, QUIT)
- one MotionCommand per distinct direction found in the world's exit tables

QUIT does not end the game itself: it asks the engine for a confirmation,
and the engine decides on the next line of input.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from adventure.engine.actions import (
    ActionResult,
    handle_drop,
    handle_help,
    handle_inventory,
    handle_look,
    handle_take,
)
from adventure.engine.motion import MotionResolver
from adventure.models.command import Verb
from adventure.models.state import GameState
from adventure.models.world import World

logger = logging.getLogger(__name__)

QUIT_PROMPT = "Confirm quit, your progress will not be saved (Y/N)? "

Handler = Callable[[str | None, World, GameState], ActionResult]


@dataclass
class CommandOutcome:
    """What a command produced for the engine to report."""

    message: str
    success: bool = True
    game_over: bool = False
    needs_confirmation: bool = False


class CommandBehavior(ABC):
    """A verb the player can issue."""

    name: str

    @abstractmethod
    def execute(self, world: World, state: GameState, object_name: str | None) -> CommandOutcome:
        """Run the command against the game state."""


class BuiltinCommand(CommandBehavior):
    """A built-in verb backed by an action handler."""

    def __init__(self, name: str, handler: Handler):
        self.name = name
        self._handler = handler

    def execute(self, world: World, state: GameState, object_name: str | None) -> CommandOutcome:
        result = self._handler(object_name, world, state)
        return CommandOutcome(message=result.message, success=result.success)


class QuitCommand(CommandBehavior):
    """Ask the player to confirm before ending the game."""

    name = Verb.QUIT.value

    def execute(
        self,
        world: World,  # noqa: ARG002
        state: GameState,  # noqa: ARG002
        object_name: str | None,  # noqa: ARG002
    ) -> CommandOutcome:
        return CommandOutcome(message=QUIT_PROMPT, needs_confirmation=True)


class MotionCommand(CommandBehavior):
    """Move in one direction; the object argument is ignored."""

    def __init__(self, direction: str, resolver: MotionResolver):
        self.name = direction
        self._resolver = resolver

    def execute(
        self,
        world: World,  # noqa: ARG002
        state: GameState,
        object_name: str | None,  # noqa: ARG002
    ) -> CommandOutcome:
        result = self._resolver.move(state, self.name)
        return CommandOutcome(
            message=result.message,
            success=result.success,
            game_over=result.game_over,
        )


BUILTIN_HANDLERS: dict[Verb, Handler] = {
    Verb.DROP: handle_drop,
    Verb.HELP: handle_help,
    Verb.INVENTORY: handle_inventory,
    Verb.LOOK: handle_look,
    Verb.TAKE: handle_take,
}


class CommandRegistry:
    """
    Maps canonical verb tokens to command behaviours.

    Usage:
        registry = CommandRegistry.for_world(world)
        command = registry.resolve("NORTH")
    """

    def __init__(self) -> None:
        self._commands: dict[str, CommandBehavior] = {}

    @classmethod
    def for_world(cls, world: World, resolver: MotionResolver | None = None) -> "CommandRegistry":
        """Build the registry for a world: built-ins plus its directions."""
        registry = cls()
        for verb, handler in BUILTIN_HANDLERS.items():
            registry.register(BuiltinCommand(verb.value, handler))
        registry.register(QuitCommand())

        resolver = resolver or MotionResolver(world)
        for direction in world.directions():
            registry.register(MotionCommand(direction, resolver))

        logger.debug(f"Registered {len(registry)} verbs: {', '.join(registry)}")
        return registry

    def register(self, command: CommandBehavior) -> None:
        """Register a command, replacing any previous one with the same name."""
        self._commands[command.name] = command

    def resolve(self, token: str) -> CommandBehavior | None:
        """Get the command for a verb token, or None if it is unknown."""
        return self._commands.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
