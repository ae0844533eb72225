"""
loader.py

PURPOSE: Load world data files into a validated World and synonym table.
DEPENDENCIES: pydantic, models

ARCHITECTURE NOTES:
An adventure called NAME is a set of text files in one directory:
- NAMERooms.txt (required)
      number
      name
      description lines...
      -----
      DIRECTION ROOM            (unconditional exit)
      DIRECTION ROOM/KEY        (exit needing KEY in the inventory)
      <blank line ends the room>
- NAMEObjects.txt (optional), records separated by blank lines:
      NAME
      description
      initial room number
- NAMESynonyms.txt (optional): ALIAS=CANONICAL lines up to a blank line

A path ending in .json holds the same data as one document:
    {"rooms": [...], "objects": [...], "synonyms": {...}}

Every problem is raised as WorldLoadError before any game starts.
"""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from adventure.models.world import World
from adventure.parser.lexer import normalize_synonyms

logger = logging.getLogger(__name__)

DESCRIPTION_END = "-----"


class WorldLoadError(Exception):
    """World data is missing or malformed."""


@dataclass
class LoadedAdventure:
    """A world plus the synonym table that goes with it."""

    name: str
    world: World
    synonyms: dict[str, str] = field(default_factory=dict)


class _Lines:
    """Line cursor over a file that reports positions in errors."""

    def __init__(self, path: Path):
        self.path = path
        try:
            with open(path, encoding="utf-8") as f:
                self._lines = f.read().splitlines()
        except UnicodeDecodeError as e:
            raise WorldLoadError(f"{path.name}: not valid UTF-8 (byte {e.start})") from e
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self._lines)

    def error(self, message: str) -> WorldLoadError:
        return WorldLoadError(f"{self.path.name}:{self.index}: {message}")

    def next(self, what: str) -> str:
        if self.exhausted:
            raise WorldLoadError(f"{self.path.name}: unexpected end of file, expected {what}")
        line = self._lines[self.index]
        self.index += 1
        return line

    def skip_blank(self) -> None:
        while not self.exhausted and not self._lines[self.index].strip():
            self.index += 1

    def next_int(self, what: str) -> int:
        line = self.next(what).strip()
        try:
            return int(line)
        except ValueError:
            raise self.error(f"expected {what}, got {line!r}") from None


def _parse_exit(lines: _Lines, line: str) -> dict[str, Any]:
    parts = line.split()
    if len(parts) < 2:
        raise lines.error(f"malformed exit {line!r}")
    direction, target = parts[0], parts[1]
    key = None
    if "/" in target:
        target, key = target.split("/", 1)
    try:
        destination = int(target)
    except ValueError:
        raise lines.error(f"exit {direction} has bad room number {target!r}") from None
    return {"direction": direction, "destination": destination, "key": key or None}


def _read_rooms(path: Path) -> Iterator[dict[str, Any]]:
    lines = _Lines(path)
    lines.skip_blank()
    while not lines.exhausted:
        number = lines.next_int("room number")
        name = lines.next("room name").strip()

        description: list[str] = []
        while (line := lines.next(f"'{DESCRIPTION_END}' after room {number}")) != DESCRIPTION_END:
            description.append(line)

        exits = []
        while not lines.exhausted:
            line = lines.next("exit")
            if not line.strip():
                break
            exits.append(_parse_exit(lines, line))

        yield {"number": number, "name": name, "description": description, "exits": exits}
        lines.skip_blank()


def _read_objects(path: Path) -> Iterator[dict[str, Any]]:
    lines = _Lines(path)
    lines.skip_blank()
    while not lines.exhausted:
        words = lines.next("object name").split()
        description = lines.next(f"description of {words[0]}").strip()
        location = lines.next_int(f"initial room of {words[0]}")
        yield {"name": words[0], "description": description, "initial_location": location}
        lines.skip_blank()


def _read_synonyms(path: Path) -> dict[str, str]:
    lines = _Lines(path)
    synonyms: dict[str, str] = {}
    while not lines.exhausted:
        line = lines.next("synonym")
        if not line.strip():
            break
        alias, sep, canonical = line.partition("=")
        if not sep or not alias.strip() or not canonical.strip():
            raise lines.error(f"malformed synonym {line!r}")
        synonyms[alias] = canonical
    return normalize_synonyms(synonyms)


def _build_world(source: Path, data: dict[str, Any]) -> World:
    try:
        return World.model_validate(data)
    except ValidationError as e:
        raise WorldLoadError(f"Invalid world in {source}: {e}") from e


def load_json_adventure(path: Path) -> LoadedAdventure:
    """Load a single-document JSON adventure."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise WorldLoadError(f"Problem reading {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise WorldLoadError(f"{path.name}: not valid UTF-8 (byte {e.start})") from e
    except json.JSONDecodeError as e:
        raise WorldLoadError(f"Invalid JSON in {path} at line {e.lineno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise WorldLoadError(f"{path} must contain a JSON object")

    synonyms = data.pop("synonyms", {}) or {}
    if not isinstance(synonyms, dict) or not all(
        isinstance(alias, str) and isinstance(canonical, str)
        for alias, canonical in synonyms.items()
    ):
        raise WorldLoadError(f"{path}: synonyms must map strings to strings")
    world = _build_world(path, data)
    logger.debug(f"Loaded {len(world.rooms)} rooms and {len(world.objects)} objects from {path}")
    return LoadedAdventure(name=path.stem, world=world, synonyms=normalize_synonyms(synonyms))


def load_adventure(name: str, directory: Path | None = None) -> LoadedAdventure:
    """
    Load an adventure by name.

    Args:
        name: Adventure name (the file prefix) or a path to a .json world
        directory: Where the adventure files live (default: current directory)

    Returns:
        LoadedAdventure with the validated world and synonym table

    Raises:
        WorldLoadError: if the files are missing or malformed
    """
    directory = directory or Path.cwd()

    if name.lower().endswith(".json"):
        path = Path(name)
        if not path.is_absolute() and not path.exists():
            path = directory / path
        return load_json_adventure(path)

    rooms_path = directory / f"{name}Rooms.txt"
    objects_path = directory / f"{name}Objects.txt"
    synonyms_path = directory / f"{name}Synonyms.txt"

    try:
        rooms = list(_read_rooms(rooms_path))
        objects = list(_read_objects(objects_path)) if objects_path.exists() else []
        synonyms = _read_synonyms(synonyms_path) if synonyms_path.exists() else {}
    except OSError as e:
        raise WorldLoadError(f"Problem reading {e.filename}: {e.strerror}") from e

    world = _build_world(rooms_path, {"rooms": rooms, "objects": objects})
    logger.debug(
        f"Loaded adventure {name!r}: {len(world.rooms)} rooms, "
        f"{len(world.objects)} objects, {len(synonyms)} synonyms"
    )
    return LoadedAdventure(name=name, world=world, synonyms=synonyms)
