"""
TEST DOC: Game Engine

WHAT: Tests for the engine loop: start, input handling, dispatch, QUIT
WHY: The engine decides what each line of input does to the session
HOW: Feed lines to a GameEngine and check TurnResults and state

CASES:
- Starting room described and marked visited
- Synonyms applied before lookup
- Scenario: LOOK, NORTH, SOUTH, QUIT, Y
- QUIT confirmation accepted / declined / custom affirmative

EDGE CASES:
- Unknown verb and unknown object leave state untouched
- Empty input
- Input after the game is over
"""

from adventure.engine.commands import QUIT_PROMPT
from adventure.engine.engine import GameEngine
from adventure.models.world import World


class TestStart:
    """Tests for starting a session."""

    def test_start_describes_first_room(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        result = engine.start()
        assert result.message == "You are in a long hall."
        assert not result.error
        assert engine.running

    def test_start_marks_first_room_visited(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        assert not engine.state.is_visited(1)
        engine.start()
        assert engine.state.is_visited(1)
        assert not engine.state.is_visited(2)

    def test_start_lists_objects(self, small_adventure):
        engine = GameEngine(small_adventure.world, synonyms=small_adventure.synonyms)
        result = engine.start()
        lines = result.message.splitlines()
        assert lines[0].startswith("You are standing at the end of a road")
        assert lines[-1] == "There is a brightly shining brass lamp here"

    def test_not_running_before_start(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        assert not engine.running
        result = engine.process_input("LOOK")
        assert result.game_over


class TestScenario:
    """End-to-end command sequences."""

    def test_look_north_south_quit(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()

        outputs = [engine.process_input(line) for line in ["LOOK", "NORTH", "SOUTH", "QUIT"]]
        assert outputs[0].message == "You are in a long hall."
        assert outputs[1].message == "Books line every wall."
        assert outputs[2].message == "Hall"
        assert outputs[3].message == QUIT_PROMPT
        assert outputs[3].awaiting_confirmation
        assert engine.running

        final = engine.process_input("Y")
        assert final.game_over
        assert not engine.running

    def test_key_needed_for_west(self, keyed_world: World):
        engine = GameEngine(keyed_world)
        engine.start()

        assert engine.process_input("TAKE KEY").message == "Taken"
        result = engine.process_input("WEST")
        assert not result.error
        assert engine.state.current_room == 3
        assert result.message == "A walled garden."

    def test_west_without_key(self, keyed_world: World):
        engine = GameEngine(keyed_world)
        engine.start()

        result = engine.process_input("WEST")
        assert result.error
        assert result.message == "Unavailable direction"
        assert engine.state.current_room == 1

    def test_forced_exit_to_missing_room_ends_game(self, forced_world: World):
        engine = GameEngine(forced_world)
        engine.start()

        result = engine.process_input("DOWN")
        assert result.game_over
        assert result.message == "You fall into the chasm."
        assert not engine.running
        assert not engine.state.is_visited(4)

    def test_small_adventure_walkthrough(self, small_engine: GameEngine):
        result = small_engine.process_input("n")
        assert "There is a set of keys here" in result.message

        # Without the keys the grate bounces the player back inside
        result = small_engine.process_input("d")
        assert result.message.splitlines()[-1] == "Inside building"
        assert small_engine.state.current_room == 3

        assert small_engine.process_input("get key").message == "Taken"
        small_engine.process_input("d")
        assert small_engine.state.current_room == 4

        result = small_engine.process_input("w")
        assert result.game_over
        assert not small_engine.running


class TestInputHandling:
    """Tests for tokenizing, synonyms and rejection."""

    def test_synonym_for_verb(self, small_engine: GameEngine):
        result = small_engine.process_input("i")
        assert result.message == "Your inventory is empty"

    def test_synonym_for_object(self, small_engine: GameEngine):
        small_engine.process_input("north")
        result = small_engine.process_input("take key")
        assert result.message == "Taken"
        assert small_engine.state.inventory == ["KEYS"]

    def test_case_insensitive(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("  north ")
        assert engine.state.current_room == 2

    def test_unknown_verb(self, small_engine: GameEngine):
        before = small_engine.state.model_dump()
        result = small_engine.process_input("xyzzy")
        assert result.error
        assert result.message == "Unavailable command"
        assert small_engine.state.model_dump() == before

    def test_known_verb_unknown_object(self, small_engine: GameEngine):
        before = small_engine.state.model_dump()
        result = small_engine.process_input("take sword")
        assert result.error
        assert result.message == "Unavailable command"
        assert small_engine.state.model_dump() == before

    def test_too_many_words(self, small_engine: GameEngine):
        result = small_engine.process_input("take the lamp")
        assert result.error
        assert result.message == "Unavailable command"

    def test_empty_input_ignored(self, small_engine: GameEngine):
        result = small_engine.process_input("   ")
        assert not result.error
        assert result.message == ""
        assert small_engine.running

    def test_direction_ignores_object_argument(self, two_room_world: World):
        engine = GameEngine(
            World.model_validate(
                {
                    **two_room_world.model_dump(),
                    "objects": [{"name": "BOOK", "description": "a book", "initial_location": 1}],
                }
            )
        )
        engine.start()
        engine.process_input("NORTH BOOK")
        assert engine.state.current_room == 2


class TestQuit:
    """Tests for the QUIT confirmation."""

    def test_declined(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("QUIT")

        result = engine.process_input("N")
        assert not result.game_over
        assert engine.running

        # Play continues normally
        engine.process_input("NORTH")
        assert engine.state.current_room == 2

    def test_answer_is_not_a_command(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("QUIT")
        engine.process_input("NORTH")
        assert engine.state.current_room == 1
        assert engine.running

    def test_lower_case_affirmative(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("QUIT")
        assert engine.process_input(" y ").game_over

    def test_only_exact_affirmative(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("QUIT")
        engine.process_input("YES")
        assert engine.running

    def test_custom_affirmative(self, two_room_world: World):
        engine = GameEngine(two_room_world, affirmative="oui")
        engine.start()
        engine.process_input("QUIT")
        engine.process_input("Y")
        assert engine.running

        engine.process_input("QUIT")
        engine.process_input("OUI")
        assert not engine.running

    def test_quit_synonym(self, small_engine: GameEngine):
        result = small_engine.process_input("q")
        assert result.awaiting_confirmation

    def test_input_after_game_over(self, two_room_world: World):
        engine = GameEngine(two_room_world)
        engine.start()
        engine.process_input("QUIT")
        engine.process_input("Y")

        result = engine.process_input("NORTH")
        assert result.game_over
        assert engine.state.current_room == 1
