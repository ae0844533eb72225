"""
engine.py

PURPOSE: Core game engine that runs one game session turn by turn.
DEPENDENCIES: models, parser, commands, opentelemetry-api

ARCHITECTURE NOTES:
The GameEngine is the session object - one instance per game:
- Holds the World, the GameState and the CommandRegistry
- Tokenizes input and applies the synonym table
- Parses the tokens and dispatches to the registered command
- Keeps the QUIT confirmation pending until the next line arrives
- Returns narrative text for display

The engine never reads or writes the console; the CLI (or a test) feeds it
lines and shows the TurnResults it returns.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from opentelemetry import trace

from adventure.engine.actions import describe_room
from adventure.engine.commands import CommandRegistry
from adventure.engine.motion import MotionResolver
from adventure.models.state import GameState
from adventure.models.world import World
from adventure.parser.lexer import apply_synonyms, normalize_synonyms, tokenize
from adventure.parser.parser import ParseResult, parse

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

DEFAULT_AFFIRMATIVE = "Y"


@dataclass
class TurnResult:
    """Result of processing a player turn."""

    message: str  # Narrative text to display
    game_over: bool = False
    error: bool = False  # True if the command was rejected
    awaiting_confirmation: bool = False  # True if the next line answers a prompt


class GameEngine:
    """
    The core game engine.

    Manages game state and executes player commands.
    """

    def __init__(
        self,
        world: World,
        synonyms: Mapping[str, str] | None = None,
        state: GameState | None = None,
        affirmative: str = DEFAULT_AFFIRMATIVE,
    ):
        """
        Initialize the engine with a world definition.

        Args:
            world: The world to play
            synonyms: Alias -> canonical token table
            state: Optional existing state (defaults to a fresh game)
            affirmative: Exact answer that confirms QUIT
        """
        self.world = world
        self.synonyms = normalize_synonyms(synonyms or {})
        self.state = state or GameState.from_world(world)
        self.affirmative = affirmative.strip().upper()
        self.motion = MotionResolver(world)
        self.registry = CommandRegistry.for_world(world, self.motion)
        self._confirming_quit = False

    @property
    def running(self) -> bool:
        return self.state.running

    def start(self) -> TurnResult:
        """
        Put the player in the first room and describe it.

        The starting room counts as visited once its description is shown.
        """
        room = self.world.first_room()
        self.state.current_room = room.number
        self.state.running = True
        self._confirming_quit = False
        message = describe_room(room, self.world, self.state)
        self.state.mark_visited(room.number)
        logger.info(f"Game started in room {room.number}")
        return TurnResult(message=message)

    def process_input(self, user_input: str) -> TurnResult:
        """
        Process a line of player input.

        This is the main entry point for the game loop.

        Args:
            user_input: Raw text from the player

        Returns:
            TurnResult with message and game state changes
        """
        if not self.state.running:
            return TurnResult(message="The game is over.", game_over=True)

        if self._confirming_quit:
            return self._answer_quit(user_input)

        tokens = tokenize(user_input)
        if not tokens:
            return TurnResult(message="")

        with tracer.start_as_current_span("engine.turn") as span:
            tokens = apply_synonyms(tokens, self.synonyms)
            span.set_attribute("turn.tokens", " ".join(tokens))

            parse_result: ParseResult = parse(tokens, self.registry, self.world, user_input)
            if not parse_result.success:
                assert parse_result.error is not None
                logger.debug(f"Rejected input {user_input!r}")
                return TurnResult(message=parse_result.error.message, error=True)

            command = parse_result.command
            assert command is not None
            span.set_attribute("turn.verb", command.verb)

            behavior = self.registry.resolve(command.verb)
            assert behavior is not None
            outcome = behavior.execute(self.world, self.state, command.object_name)

            if outcome.needs_confirmation:
                self._confirming_quit = True
                return TurnResult(message=outcome.message, awaiting_confirmation=True)

            if outcome.game_over:
                logger.info(f"Game ended by moving {command.verb}")

            return TurnResult(
                message=outcome.message,
                game_over=outcome.game_over,
                error=not outcome.success,
            )

    def _answer_quit(self, answer: str) -> TurnResult:
        """Handle the line that follows a QUIT prompt."""
        self._confirming_quit = False
        if answer.strip().upper() == self.affirmative:
            self.state.end_game()
            logger.info("Player quit")
            return TurnResult(message="", game_over=True)
        return TurnResult(message="")
