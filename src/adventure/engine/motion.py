"""
motion.py

PURPOSE: Resolve motion commands against the current room's exit table.
DEPENDENCIES: models, opentelemetry-api

ARCHITECTURE NOTES:
Motion is a transition function over GameState.current_room:
1. Find the first exit row matching the direction that the player can use
   (no key, or the key is carried).
2. A destination with no room ends the game.
3. Entering a room shows its full description the first time, its name after.
4. If the room's FIRST exit row is FORCED, that exit is taken at once and the
   room is not marked visited. Rows further down are never auto-triggered.

Forced chains run inside a single move. A chain that re-enters one of its
own rooms can never finish, so it raises ForcedMotionLoopError.
"""

import logging
from dataclasses import dataclass, field

from opentelemetry import trace

from adventure.engine.actions import describe_room
from adventure.models.state import GameState
from adventure.models.world import FORCED, ExitEntry, Room, World

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

UNAVAILABLE_DIRECTION = "Unavailable direction"


class ForcedMotionLoopError(Exception):
    """Forced exits lead back into a room already passed in the same chain."""


@dataclass
class MotionResult:
    """Outcome of one motion command, including any forced chain."""

    lines: list[str] = field(default_factory=list)
    success: bool = True
    game_over: bool = False

    @property
    def message(self) -> str:
        return "\n".join(self.lines)


class MotionResolver:
    """Moves the player through a world's exit tables."""

    def __init__(self, world: World):
        self.world = world

    def find_exit(self, room: Room, direction: str, state: GameState) -> ExitEntry | None:
        """First usable exit row for a direction, or None."""
        for entry in room.exits:
            if entry.direction != direction:
                continue
            if entry.key is None or state.is_in_inventory(entry.key):
                return entry
        return None

    def move(self, state: GameState, direction: str) -> MotionResult:
        """
        Move the player in a direction.

        Args:
            state: Game state (current_room, visited flags and running
                   are updated)
            direction: Upper-case direction token

        Returns:
            MotionResult with the text to show
        """
        with tracer.start_as_current_span("motion.move") as span:
            span.set_attribute("motion.direction", direction)
            span.set_attribute("motion.from_room", state.current_room)
            result = MotionResult()
            chain: set[int] = set()
            moved = False

            while True:
                room = self.world.room_by_number(state.current_room)
                entry = self.find_exit(room, direction, state) if room else None
                if entry is None:
                    logger.debug(f"No usable {direction} exit from room {state.current_room}")
                    result.lines.append(UNAVAILABLE_DIRECTION)
                    # A failed forced exit leaves the player where the chain stopped
                    result.success = moved
                    break

                destination = self.world.room_by_number(entry.destination)
                if destination is None:
                    logger.debug(f"Exit {direction} leads to missing room {entry.destination}")
                    state.end_game()
                    result.game_over = True
                    break

                if direction == FORCED:
                    if destination.number in chain:
                        raise ForcedMotionLoopError(
                            f"Forced exits loop back into room {destination.number}"
                        )
                    chain.add(state.current_room)

                state.current_room = destination.number
                moved = True
                logger.debug(f"Moved {direction} to room {destination.number}")

                if state.is_visited(destination.number):
                    result.lines.append(destination.name)
                else:
                    result.lines.append(describe_room(destination, self.world, state))

                if not destination.first_exit_forced:
                    state.mark_visited(destination.number)
                    break

                direction = FORCED

            span.set_attribute("motion.to_room", state.current_room)
            span.set_attribute("motion.game_over", result.game_over)
            return result
