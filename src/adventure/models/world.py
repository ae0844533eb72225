"""
world.py

PURPOSE: Pydantic models for the static world definition (rooms, exits, objects).
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
These models define the STATIC world content - what exists in the game.
They are separate from GameState, which tracks MUTABLE state during play
(visited flags, where each object currently is, the running flag).

Room numbers are the keys of the world. An exit whose destination names
no room is not an error: it is how a world marks the end of the game.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Direction token of an exit that is taken automatically on arrival
FORCED = "FORCED"


class ExitEntry(BaseModel):
    """
    One row of a room's exit table.

    Rows are checked in declared order; the first row matching the
    direction that is usable wins.
    """

    model_config = ConfigDict(frozen=True)

    direction: str = Field(..., min_length=1, description="Direction token, e.g. NORTH")
    destination: int = Field(..., description="Room number reached through this exit")
    key: str | None = Field(
        default=None,
        description="Object name that must be carried to use this exit",
    )

    @field_validator("direction", "key")
    @classmethod
    def upper_case_tokens(cls, v: str | None) -> str | None:
        return v.upper() if v else v

    @property
    def forced(self) -> bool:
        return self.direction == FORCED


class Room(BaseModel):
    """
    A numbered location in the world.

    The long description is kept line by line, the way it is shown.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    description: tuple[str, ...] = Field(default_factory=tuple)
    exits: tuple[ExitEntry, ...] = Field(default_factory=tuple)

    @field_validator("name")
    @classmethod
    def single_line_name(cls, v: str) -> str:
        if "\n" in v:
            raise ValueError("Room name must be a single line")
        return v

    @property
    def first_exit_forced(self) -> bool:
        """Whether arriving here immediately moves the player on."""
        return bool(self.exits) and self.exits[0].forced


class GameObject(BaseModel):
    """An object the player can take and drop."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Word used to refer to the object")
    description: str = Field(..., min_length=1, description="Article + noun phrase")
    initial_location: int = Field(..., gt=0, description="Room the object starts in")

    @field_validator("name")
    @classmethod
    def upper_case_name(cls, v: str) -> str:
        return v.upper()


class World(BaseModel):
    """
    A complete world definition.

    Rooms are stored in ascending number order; the first one is where
    the player starts.
    """

    model_config = ConfigDict(frozen=True)

    rooms: tuple[Room, ...] = Field(..., min_length=1)
    objects: tuple[GameObject, ...] = Field(default_factory=tuple)

    @field_validator("rooms")
    @classmethod
    def sort_rooms(cls, v: tuple[Room, ...]) -> tuple[Room, ...]:
        return tuple(sorted(v, key=lambda room: room.number))

    @model_validator(mode="after")
    def validate_references(self) -> "World":
        """Ensure keys are unique and objects start in real rooms."""
        numbers = [room.number for room in self.rooms]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate room numbers: {duplicates}")

        names = [obj.name for obj in self.objects]
        duplicate_names = sorted({n for n in names if names.count(n) > 1})
        if duplicate_names:
            raise ValueError(f"Duplicate object names: {duplicate_names}")

        room_numbers = set(numbers)
        for obj in self.objects:
            if obj.initial_location not in room_numbers:
                raise ValueError(
                    f"Object '{obj.name}' starts in unknown room {obj.initial_location}"
                )
        return self

    def room_by_number(self, number: int) -> Room | None:
        """Get a room by number."""
        for room in self.rooms:
            if room.number == number:
                return room
        return None

    def object_by_name(self, name: str) -> GameObject | None:
        """Get an object by name (case-insensitive)."""
        name = name.upper()
        for obj in self.objects:
            if obj.name == name:
                return obj
        return None

    def first_room(self) -> Room:
        """The room with the smallest number."""
        return self.rooms[0]

    def exits_of(self, number: int) -> tuple[ExitEntry, ...]:
        room = self.room_by_number(number)
        return room.exits if room else ()

    def directions(self) -> list[str]:
        """Distinct direction tokens across every exit table, first-seen order."""
        seen: dict[str, None] = {}
        for room in self.rooms:
            for entry in room.exits:
                seen.setdefault(entry.direction, None)
        return list(seen)
