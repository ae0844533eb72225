"""Domain models for the adventure game."""

from adventure.models.command import BUILTIN_VERBS, Command, Verb
from adventure.models.state import INVENTORY, GameState, RoomState
from adventure.models.world import FORCED, ExitEntry, GameObject, Room, World

__all__ = [
    "BUILTIN_VERBS",
    "FORCED",
    "INVENTORY",
    "Command",
    "ExitEntry",
    "GameObject",
    "GameState",
    "Room",
    "RoomState",
    "Verb",
    "World",
]
