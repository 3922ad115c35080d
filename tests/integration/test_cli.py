"""Integration tests for the console entry point.

Tests cover:
- Playing a few commands against the bundled world
- Errors reported without ending the session
- Listing worlds
"""

import pytest
from click.testing import CliRunner

from dungeon.__main__ import main, wrap
from dungeon.config import PROJECT_ROOT

pytestmark = pytest.mark.integration

WORLDS_DIR = str(PROJECT_ROOT / "worlds")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_play_session(runner: CliRunner) -> None:
    """Take the axe, look at the inventory and quit."""
    result = runner.invoke(
        main,
        ["--worlds-dir", WORLDS_DIR, "--world", "dungeon"],
        input="take axe\ninventory\nquit\n",
    )

    assert result.exit_code == 0, result.output
    assert "You wake on cold flagstones" in result.output
    assert "Okay, took an axe with a notch in the blade." in result.output
    assert "You have an axe with a notch in the blade." in result.output
    assert result.output.rstrip().endswith("Goodbye.")


def test_error_keeps_session_going(runner: CliRunner) -> None:
    result = runner.invoke(
        main,
        ["--worlds-dir", WORLDS_DIR],
        input="go sideways\ngo north\n",
    )

    assert result.exit_code == 0, result.output
    assert "I don't know how to go sideways." in result.output
    assert "long hallway" in result.output


def test_help_is_not_wrapped(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--worlds-dir", WORLDS_DIR], input="help\n")

    assert "  attack <monster> [with <weapon>]  fight" in result.output


def test_list_worlds(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--worlds-dir", WORLDS_DIR, "--list-worlds"])

    assert result.exit_code == 0
    assert "dungeon: The Dungeon" in result.output


def test_wrap_keeps_line_breaks() -> None:
    text = "first line\n" + "word " * 30

    wrapped = wrap(text, 40)

    assert wrapped.startswith("first line\n")
    assert all(len(line) <= 40 for line in wrapped.splitlines())
