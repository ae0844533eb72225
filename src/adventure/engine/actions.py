"""
actions.py

PURPOSE: Action handlers for the built-in commands.
DEPENDENCIES: models

ARCHITECTURE NOTES:
Each built-in verb has a handler that:
- Checks whether the action is possible
- Updates game state
- Returns narrative text

Handlers take the optional object name, the world and the state.
An impossible action is not an error: the player is told why and
nothing changes.
"""

from dataclasses import dataclass

from adventure.models.command import BUILTIN_VERBS
from adventure.models.state import INVENTORY, GameState
from adventure.models.world import Room, World


@dataclass
class ActionResult:
    """Result of executing an action."""

    message: str
    success: bool = True


def describe_room(room: Room, world: World, state: GameState) -> str:
    """Long description of a room, followed by one line per object in it."""
    lines = list(room.description)
    for name in state.objects_at(room.number):
        obj = world.object_by_name(name)
        if obj:
            lines.append(f"There is {obj.description} here")
    return "\n".join(lines)


def handle_look(_object_name: str | None, world: World, state: GameState) -> ActionResult:
    """Handle LOOK."""
    room = world.room_by_number(state.current_room)
    if room is None:
        return ActionResult(message="You are nowhere.", success=False)
    return ActionResult(message=describe_room(room, world, state))


def handle_inventory(_object_name: str | None, world: World, state: GameState) -> ActionResult:
    """Handle INVENTORY."""
    carried = state.inventory
    if not carried:
        return ActionResult(message="Your inventory is empty")

    lines = []
    for name in carried:
        obj = world.object_by_name(name)
        if obj:
            lines.append(f"{obj.name}: {obj.description}")
    return ActionResult(message="\n".join(lines))


def handle_take(object_name: str | None, _world: World, state: GameState) -> ActionResult:
    """Handle TAKE."""
    if object_name is None:
        return ActionResult(message="There is nothing to take", success=False)

    if not state.is_in_room(object_name, state.current_room):
        return ActionResult(message=f"You don't see any {object_name}", success=False)

    state.move_object(object_name, INVENTORY)
    return ActionResult(message="Taken")


def handle_drop(object_name: str | None, _world: World, state: GameState) -> ActionResult:
    """Handle DROP."""
    if object_name is None:
        return ActionResult(message="You don't have that object", success=False)

    if not state.is_in_inventory(object_name):
        return ActionResult(message=f"You don't have any {object_name} to drop", success=False)

    state.move_object(object_name, state.current_room)
    return ActionResult(message="Dropped")


def handle_help(_object_name: str | None, _world: World, _state: GameState) -> ActionResult:
    """Handle HELP."""
    lines = ["List of all possible commands:", *BUILTIN_VERBS]
    return ActionResult(message="\n".join(lines))
