"""
validator.py

PURPOSE: Validate worlds for problems the loader cannot reject outright.
DEPENDENCIES: models

ARCHITECTURE NOTES:
The World model already rejects structural errors (duplicate keys, objects
in missing rooms). The validator reports things that load fine but play
badly:
- Exits that need a key no object provides
- FORCED exits that are not first in their table (never auto-triggered)
- Forced exits that loop forever
- Exits to missing rooms (these end the game - usually intended)
- Rooms nothing leads to
- Synonyms pointing at other aliases or at unknown words
- Directions that shadow a built-in verb
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto

from adventure.models.command import BUILTIN_VERBS
from adventure.models.world import FORCED, Room, World


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = auto()  # Will break play
    WARNING = auto()  # May cause unexpected behavior
    INFO = auto()  # Worth knowing


@dataclass
class ValidationIssue:
    """A single validation issue found in a world."""

    severity: ValidationSeverity
    message: str
    location: str  # e.g., "room:3", "synonym:N"

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.location}: {self.message}"


class WorldValidator:
    """
    Validates worlds for common issues.

    Usage:
        validator = WorldValidator(world, synonyms)
        issues = validator.validate()
        for issue in issues:
            print(issue)
    """

    def __init__(self, world: World, synonyms: Mapping[str, str] | None = None):
        self.world = world
        self.synonyms = dict(synonyms or {})
        self.issues: list[ValidationIssue] = []

        self.room_numbers = {room.number for room in world.rooms}
        self.object_names = {obj.name for obj in world.objects}
        self.verbs = set(BUILTIN_VERBS) | set(world.directions())

    def validate(self) -> list[ValidationIssue]:
        """
        Run all validation checks.

        Returns:
            List of ValidationIssue objects, sorted by severity.
        """
        self.issues = []

        for room in self.world.rooms:
            self._validate_exits(room)
        self._validate_forced_chains()
        self._validate_reachability()
        self._validate_synonyms()
        self._validate_directions()

        # Sort by severity (errors first)
        self.issues.sort(key=lambda i: i.severity.value)
        return self.issues

    def _add(self, severity: ValidationSeverity, message: str, location: str) -> None:
        self.issues.append(ValidationIssue(severity=severity, message=message, location=location))

    def _validate_exits(self, room: Room) -> None:
        location = f"room:{room.number}"
        for index, entry in enumerate(room.exits):
            if entry.key and entry.key not in self.object_names:
                self._add(
                    ValidationSeverity.ERROR,
                    f"Exit {entry.direction} needs key '{entry.key}', which does not exist. "
                    "It can never be used.",
                    location,
                )
            if entry.forced and index > 0:
                self._add(
                    ValidationSeverity.WARNING,
                    "FORCED exit is not the first exit, so arriving here will not trigger it.",
                    location,
                )
            if entry.destination not in self.room_numbers:
                self._add(
                    ValidationSeverity.INFO,
                    f"Exit {entry.direction} leads to missing room {entry.destination} "
                    "and ends the game.",
                    location,
                )

    def _validate_forced_chains(self) -> None:
        """Report forced chains that can revisit a room without a key changing."""
        for room in self.world.rooms:
            if not room.first_exit_forced:
                continue
            seen = {room.number}
            current: Room | None = room
            while current is not None and current.first_exit_forced:
                entry = current.exits[0]
                # Keyed forced exits depend on the inventory; follow only the unconditional ones
                if entry.key is not None:
                    break
                if entry.destination in seen:
                    self._add(
                        ValidationSeverity.ERROR,
                        f"Forced exits loop back to room {entry.destination}.",
                        f"room:{room.number}",
                    )
                    break
                seen.add(entry.destination)
                current = self.world.room_by_number(entry.destination)

    def _validate_reachability(self) -> None:
        targets = {entry.destination for room in self.world.rooms for entry in room.exits}
        start = self.world.first_room().number
        for room in self.world.rooms:
            if room.number != start and room.number not in targets:
                self._add(
                    ValidationSeverity.WARNING,
                    "No exit leads to this room.",
                    f"room:{room.number}",
                )

    def _validate_synonyms(self) -> None:
        known = self.verbs | self.object_names
        for alias, canonical in self.synonyms.items():
            location = f"synonym:{alias}"
            if canonical in self.synonyms:
                self._add(
                    ValidationSeverity.INFO,
                    f"Maps to '{canonical}', which is itself an alias. "
                    "Synonyms are applied once, so the second mapping is not followed.",
                    location,
                )
            elif canonical not in known:
                self._add(
                    ValidationSeverity.WARNING,
                    f"Maps to '{canonical}', which is neither a verb nor an object.",
                    location,
                )

    def _validate_directions(self) -> None:
        for direction in self.world.directions():
            if direction in BUILTIN_VERBS:
                self._add(
                    ValidationSeverity.WARNING,
                    f"Direction {direction} replaces the built-in {direction} command.",
                    f"direction:{direction}",
                )
            if direction != FORCED and direction in self.object_names:
                self._add(
                    ValidationSeverity.INFO,
                    f"Direction {direction} is also an object name.",
                    f"direction:{direction}",
                )


def validate_world(
    world: World,
    synonyms: Mapping[str, str] | None = None,
) -> list[ValidationIssue]:
    """
    Convenience function to validate a world.

    Args:
        world: The world to validate.
        synonyms: The synonym table loaded with it.

    Returns:
        List of validation issues (empty if the world is clean).
    """
    validator = WorldValidator(world, synonyms)
    return validator.validate()
