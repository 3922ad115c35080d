#!/usr/bin/env python3
"""
Dungeon console
Read commands from the terminal and play a world turn by turn.
"""
import logging
import sys
import textwrap
from datetime import datetime
from pathlib import Path

import click

from dungeon.config import get_log_dir, get_log_level, get_world_id, get_wrap_width
from dungeon.engine.processor import TurnProcessor
from dungeon.engine.world import World, WorldLoader
from dungeon.models.response import ResponseKind

QUIT_COMMANDS = {"quit", "exit"}
HANDLER_NAME = "dungeon"


def setup_logging(debug: bool = False) -> Path | None:
    """Configure logging to the console and, if DUNGEON_LOG_DIR is set, a file.

    Returns:
        Path to the log file, if one was created
    """
    log_level = logging.DEBUG if debug else getattr(logging, get_log_level(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Console handler - stderr, so it does not mix with the game text
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    log_dir = get_log_dir()
    if log_dir is None:
        return None

    # File handler - always verbose
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"dungeon_{timestamp}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.set_name(HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    return log_file


def teardown_logging() -> None:
    """Remove the handlers added by setup_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()


def wrap(text: str, width: int) -> str:
    """Wrap each line of narration to the console width."""
    return "\n".join(textwrap.fill(line, width) if line else line for line in text.splitlines())


def play(world: World) -> int:
    """Run the prompt loop until the player quits or dies.

    Returns:
        Number of turns played
    """
    processor = TurnProcessor(world.player)
    width = get_wrap_width()

    if world.intro:
        click.echo(wrap(world.intro, width))
        click.echo()
    click.echo(wrap(world.player.room.description(), width))

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.exceptions.Abort:
            break

        if line.strip().lower() in QUIT_COMMANDS:
            break

        response = processor.process(line)
        if response.kind == ResponseKind.RAW:
            click.echo(response.text)
        elif response.text:
            click.echo(wrap(response.text, width))

        if response.game_over:
            click.echo(world.player.status())
            break

    click.echo("Goodbye.")
    return processor.turn_count


@click.command()
@click.option('--world', 'world_id', default=None, help='World to play (default: DUNGEON_WORLD)')
@click.option('--worlds-dir', type=click.Path(exists=True, file_okay=False),
              default=None, help='Path to worlds directory')
@click.option('--list-worlds', is_flag=True, help='List available worlds and exit')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def main(world_id: str | None, worlds_dir: str | None, list_worlds: bool, debug: bool):
    """Play a dungeon world in the terminal."""
    log_file = setup_logging(debug=debug)
    logger = logging.getLogger(__name__)
    if log_file:
        logger.info(f"Log file: {log_file}")

    try:
        loader = WorldLoader(worlds_dir)
        if list_worlds:
            for info in loader.list_worlds():
                click.echo(f"{info['id']}: {info['name']}")
            return

        world = loader.load_world(world_id or get_world_id())
        logger.info(f"Playing '{world.name}'")
        turns = play(world)
        logger.info(f"Session ended after {turns} turns")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        teardown_logging()


if __name__ == "__main__":
    main()
