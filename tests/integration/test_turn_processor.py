"""Integration tests for TurnProcessor.

Tests cover:
- Taking portable and fixed things
- Missing doors and moving between rooms
- Killing and then eating the Blobbyblob
- Follow-up actions resolved breadth first to a fixed point
- Raw output short-circuiting the turn, from the command or a reaction
- Runaway reactions capped
- Errors leaving the session usable
"""

import logging

import pytest

from dungeon.engine.items import Axe, Blobbyblob, Item
from dungeon.engine.player import Player
from dungeon.engine.processor import TurnProcessor
from dungeon.engine.room import Room
from dungeon.models.response import ResponseKind
from tests.mocks.things import Metronome, Parrot, RecordingThing, Signpost

pytestmark = pytest.mark.integration


class TestTaking:
    """Taking things through full turns."""

    def test_take_axe(self, processor: TurnProcessor, player: Player, axe: Axe) -> None:
        response = processor.process("take axe")

        assert response.kind == ResponseKind.NARRATION
        assert response.text == "Okay, took an axe with a notch in the blade."
        assert axe.location is player
        assert player.room.find("axe") is None

    def test_take_wall(self, processor: TurnProcessor, player: Player, wall: Item) -> None:
        before = player.room.all_placed()

        response = processor.process("take wall")

        assert response.text == "Can't take wall."
        assert player.room.all_placed() == before
        assert player.things() == []

    def test_drop_then_take_again(self, processor: TurnProcessor, player: Player, axe: Axe) -> None:
        processor.process("take axe")

        assert processor.process("drop axe").text == "You drop the axe."
        assert processor.process("take axe").text == (
            "Okay, took an axe with a notch in the blade."
        )


class TestMovement:
    """Going through doors."""

    def test_no_door_up(self, processor: TurnProcessor, player: Player, cell: Room) -> None:
        response = processor.process("go up")

        assert response.kind == ResponseKind.NARRATION
        assert response.text == "No door to the up"
        assert player.room is cell

    def test_go_north(self, processor: TurnProcessor, player: Player, hall: Room) -> None:
        response = processor.process("go north")

        assert player.room is hall
        assert response.text == hall.description()


class TestCombat:
    """Fighting the Blobbyblob."""

    @pytest.fixture
    def processor(self, armed_player: Player) -> TurnProcessor:
        return TurnProcessor(armed_player, max_actions=50)

    def test_blob_strikes_back(self, processor: TurnProcessor, armed_player: Player) -> None:
        response = processor.process("attack blobbyblob")

        assert response.text == (
            "You swing your axe and connect! "
            "The Blobbyblob is wounded but still alive. And now it's mad.\n"
            "The Blobbyblob extrudes a blobby arm and smashes at you!"
        )
        assert armed_player.hit_points == 8

    def test_kill_then_eat(
        self, processor: TurnProcessor, armed_player: Player, blob: Blobbyblob
    ) -> None:
        """A dead Blobbyblob can be eaten; a live one cannot."""
        assert processor.process("eat blobbyblob").text.startswith(
            "Are you out of your mind?!"
        )

        processor.process("attack blobbyblob")
        response = processor.process("attack blobbyblob with axe")

        assert blob.alive is False
        assert response.text == "You swing your axe and connect! The Blobbyblob is dead. Murderer."
        assert processor.process("eat blobbyblob").text.startswith("Ugh.")

    def test_one_blow_kill(self, armed_player: Player, axe: Axe, blob: Blobbyblob) -> None:
        """Damage at least the remaining hit points kills without retaliation."""
        axe.damage = 5
        processor = TurnProcessor(armed_player)

        response = processor.process("attack blobbyblob")

        assert blob.alive is False
        assert "extrudes" not in response.text
        assert armed_player.hit_points == 10

    def test_player_dies(self, processor: TurnProcessor, armed_player: Player) -> None:
        armed_player.hit_points = 2

        response = processor.process("attack blobbyblob")

        assert response.game_over is True
        assert armed_player.alive is False


class TestPropagation:
    """Follow-up actions are resolved before the command's output is final."""

    def test_follow_up_is_narrated_and_propagated(
        self, processor: TurnProcessor, player: Player
    ) -> None:
        parrot = Parrot()
        recorder = RecordingThing()
        player.room.place(parrot, parrot.where())
        player.take(recorder)

        response = processor.process("say pieces of eight")

        assert response.text == (
            "You say 'pieces of eight'.\n'pieces of eight' says the parrot."
        )
        # The recorder heard the player, the turn tick, then the parrot's echo
        said = [action for action in recorder.seen if action.type == "say"]
        assert [action.speaker for action in said] == [player, parrot]

    def test_breadth_first_order(self, processor: TurnProcessor, player: Player) -> None:
        """The turn tick is resolved before follow-ups of the primary action."""
        parrot = Parrot()
        recorder = RecordingThing()
        player.room.place(parrot, parrot.where())
        player.take(recorder)

        processor.process("say hi")

        assert [action.type.value for action in recorder.seen] == ["say", "turn", "say"]

    def test_turn_tick_every_command(self, processor: TurnProcessor, player: Player) -> None:
        recorder = RecordingThing()
        player.take(recorder)

        processor.process("look")
        processor.process("inventory")

        assert [action.type.value for action in recorder.seen] == ["look", "turn", "turn"]

    def test_reachable_after_moving(
        self, processor: TurnProcessor, player: Player, hall: Room
    ) -> None:
        """Things in the room being entered hear about the entrance."""
        recorder = RecordingThing()
        hall.place(recorder, "on the floor")

        processor.process("go north")

        assert [action.type.value for action in recorder.seen] == ["go", "turn"]

    def test_runaway_reactions_are_capped(
        self, player: Player, caplog: pytest.LogCaptureFixture
    ) -> None:
        player.room.place(Metronome(), "on the floor")
        processor = TurnProcessor(player, max_actions=20)

        with caplog.at_level(logging.WARNING, logger="dungeon.engine.processor"):
            response = processor.process("look")

        assert response.text == player.room.description()
        assert "Stopped resolving after 20 actions" in caplog.text


class TestOutcomes:
    """The three outcomes of a command."""

    def test_raw_output(self, processor: TurnProcessor, player: Player) -> None:
        recorder = RecordingThing()
        player.take(recorder)

        response = processor.process("help")

        assert response.kind == ResponseKind.RAW
        assert response.text.startswith("Commands:")
        assert recorder.seen == []

    def test_raw_output_from_reaction(self, processor: TurnProcessor, player: Player) -> None:
        """Raw output queued by a reaction replaces the narration collected so far."""
        recorder = RecordingThing()
        player.take(recorder)
        player.room.place(Signpost(), "by the door")

        response = processor.process("look")

        assert response.kind == ResponseKind.RAW
        assert response.text == "==> EXIT <=="
        # The Turn tick was resolved before the raw output was dequeued
        assert [action.type.value for action in recorder.seen] == ["look", "turn"]

    def test_error_then_continue(self, processor: TurnProcessor, axe: Axe, player: Player) -> None:
        response = processor.process("take")

        assert response.kind == ResponseKind.ERROR
        assert response.text == "Take what?"
        assert processor.turn_count == 0

        assert processor.process("take axe").kind == ResponseKind.NARRATION
        assert processor.turn_count == 1
