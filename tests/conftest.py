"""
conftest.py

Shared pytest fixtures for adventure tests.
"""

from pathlib import Path

import pytest

from adventure.engine.engine import GameEngine
from adventure.loader import LoadedAdventure, load_adventure
from adventure.models.state import GameState
from adventure.models.world import World

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample adventure files."""
    return FIXTURES_DIR


@pytest.fixture
def small_adventure() -> LoadedAdventure:
    """Load the Small sample adventure from its text files."""
    return load_adventure("Small", FIXTURES_DIR)


@pytest.fixture
def small_world(small_adventure: LoadedAdventure) -> World:
    return small_adventure.world


@pytest.fixture
def small_engine(small_adventure: LoadedAdventure) -> GameEngine:
    """A started engine on the Small adventure."""
    engine = GameEngine(small_adventure.world, synonyms=small_adventure.synonyms)
    engine.start()
    return engine


@pytest.fixture
def two_room_world_dict() -> dict:
    """Two rooms joined north/south, no objects."""
    return {
        "rooms": [
            {
                "number": 1,
                "name": "Hall",
                "description": ["You are in a long hall."],
                "exits": [{"direction": "NORTH", "destination": 2}],
            },
            {
                "number": 2,
                "name": "Library",
                "description": ["Books line every wall."],
                "exits": [{"direction": "SOUTH", "destination": 1}],
            },
        ],
    }


@pytest.fixture
def two_room_world(two_room_world_dict: dict) -> World:
    return World.model_validate(two_room_world_dict)


@pytest.fixture
def keyed_world() -> World:
    """Room 1 has a WEST exit to room 3 that needs the KEY lying in room 1."""
    return World.model_validate(
        {
            "rooms": [
                {
                    "number": 1,
                    "name": "Gatehouse",
                    "description": ["A locked gate stands to the west."],
                    "exits": [
                        {"direction": "WEST", "destination": 3, "key": "KEY"},
                        {"direction": "EAST", "destination": 2},
                    ],
                },
                {
                    "number": 2,
                    "name": "Yard",
                    "description": ["An empty yard."],
                    "exits": [{"direction": "WEST", "destination": 1}],
                },
                {
                    "number": 3,
                    "name": "Garden",
                    "description": ["A walled garden."],
                    "exits": [{"direction": "EAST", "destination": 1}],
                },
            ],
            "objects": [
                {"name": "KEY", "description": "a rusty iron key", "initial_location": 1},
            ],
        }
    )


@pytest.fixture
def forced_world() -> World:
    """
    Room 1 leads NORTH to room 2, whose first exit is FORCED to room 3.
    Room 1 also leads DOWN to room 4, which is forced into the void (room 0).
    """
    return World.model_validate(
        {
            "rooms": [
                {
                    "number": 1,
                    "name": "Ledge",
                    "description": ["A narrow ledge."],
                    "exits": [
                        {"direction": "NORTH", "destination": 2},
                        {"direction": "DOWN", "destination": 4},
                    ],
                },
                {
                    "number": 2,
                    "name": "Slide",
                    "description": ["You slip down a long slide!"],
                    "exits": [{"direction": "FORCED", "destination": 3}],
                },
                {
                    "number": 3,
                    "name": "Pool",
                    "description": ["You land in a shallow pool."],
                    "exits": [{"direction": "UP", "destination": 1}],
                },
                {
                    "number": 4,
                    "name": "Chasm",
                    "description": ["You fall into the chasm."],
                    "exits": [{"direction": "FORCED", "destination": 0}],
                },
            ],
        }
    )


@pytest.fixture
def two_room_state(two_room_world: World) -> GameState:
    return GameState.from_world(two_room_world)
