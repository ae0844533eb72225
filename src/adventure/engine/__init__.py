"""Game engine module."""

from adventure.engine.actions import ActionResult, describe_room
from adventure.engine.commands import CommandBehavior, CommandRegistry
from adventure.engine.engine import GameEngine, TurnResult
from adventure.engine.motion import ForcedMotionLoopError, MotionResolver, MotionResult

__all__ = [
    "ActionResult",
    "CommandBehavior",
    "CommandRegistry",
    "ForcedMotionLoopError",
    "GameEngine",
    "MotionResolver",
    "MotionResult",
    "TurnResult",
    "describe_room",
]
