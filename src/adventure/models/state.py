"""
state.py

PURPOSE: Mutable game state that changes during play.
DEPENDENCIES: pydantic, world.py

ARCHITECTURE NOTES:
GameState is separate from the static World definition.
It tracks what has changed: player location, where each object is,
which rooms have been visited, and whether play continues.

Every object has exactly one location: a room number or INVENTORY.
Moving an object re-inserts its entry, so iterating `objects` lists
a room's contents (and the inventory) in the order things arrived.
"""

from typing import Literal

from pydantic import BaseModel, Field

from adventure.models.world import World

INVENTORY: Literal["inventory"] = "inventory"

Location = int | Literal["inventory"]


class RoomState(BaseModel):
    """Runtime state of a room."""

    visited: bool = Field(default=False)


class GameState(BaseModel):
    """Complete mutable state of a game in progress."""

    current_room: int = Field(..., description="Number of the room the player is in")
    running: bool = Field(default=False)
    objects: dict[str, Location] = Field(
        default_factory=dict,
        description="Current location of each object by name",
    )
    rooms: dict[int, RoomState] = Field(
        default_factory=dict,
        description="State of each room by number",
    )

    @classmethod
    def from_world(cls, world: World) -> "GameState":
        """
        Create initial state from a world definition.

        The player stands in the first room, which is not yet visited:
        the engine marks it once its description has been shown.
        """
        return cls(
            current_room=world.first_room().number,
            running=False,
            objects={obj.name: obj.initial_location for obj in world.objects},
            rooms={room.number: RoomState() for room in world.rooms},
        )

    @property
    def inventory(self) -> list[str]:
        """Names of carried objects, in the order they were picked up."""
        return self.objects_at(INVENTORY)

    def objects_at(self, location: Location) -> list[str]:
        """Names of objects at a location, in arrival order."""
        return [name for name, where in self.objects.items() if where == location]

    def location_of(self, name: str) -> Location | None:
        return self.objects.get(name)

    def is_in_inventory(self, name: str) -> bool:
        return self.objects.get(name) == INVENTORY

    def is_in_room(self, name: str, number: int) -> bool:
        return self.objects.get(name) == number

    def move_object(self, name: str, location: Location) -> None:
        """Move an object to a new location (room number or INVENTORY)."""
        if name not in self.objects:
            raise KeyError(f"Unknown object '{name}'")
        del self.objects[name]
        self.objects[name] = location

    def is_visited(self, number: int) -> bool:
        room_state = self.rooms.get(number)
        return room_state.visited if room_state else False

    def mark_visited(self, number: int) -> None:
        self.rooms.setdefault(number, RoomState()).visited = True

    def end_game(self) -> None:
        """Clear the running flag."""
        self.running = False
