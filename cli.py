"""
cli.py
======
Command-line interface for Manor Mystery.

Text-based game loop over stdin/stdout. All game logic is delegated to
ManorGame; this module only reads input and wires up configuration and
logging.

Usage:
    python cli.py          (or the installed ``manor-mystery`` script)

Commands during exploration (case-insensitive):
    l / left  / e   - go to the left room
    r / right / d   - go to the right room
    x / exit  / s   - stop exploring and make the final accusation

During judgment, type the name of the suspect you accuse.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from dotenv import load_dotenv

from config import GameConfig, load_game_config, log_level
from game_engine import CommandSource, new_game
from models import Verdict

logger = logging.getLogger("manor_mystery.cli")

LOG_FORMAT  = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class StdinCommands:
    """CommandSource reading one line per request; EOFError propagates."""

    def __init__(self, read: Optional[Callable[[str], str]] = None) -> None:
        self._read = read if read is not None else input

    def next_command(self) -> str:
        return self._read("Your choice: ")

    def next_accusation(self) -> str:
        # Only the first word counts as the name.
        words = self._read("\nWho do you accuse? ").split()
        return words[0] if words else ""


def run_cli(
    source: Optional[CommandSource] = None,
    emit:   Callable[[str], None] = print,
    config: Optional[GameConfig] = None,
) -> Verdict:
    """
    Play one full investigation and release everything afterwards.

    Args:
        source: Where commands come from. Defaults to stdin.
        emit:   Line printer. Defaults to ``print``.
        config: Rules to use. Defaults to the environment-derived config.

    Returns:
        The final Verdict.
    """
    cfg  = config if config is not None else load_game_config()
    game = new_game(cfg)
    try:
        verdict = game.play(source if source is not None else StdinCommands(), emit)
    finally:
        game.close()
    emit("")
    emit("System shut down.")
    return verdict


def main() -> int:
    """Console-script entry point. Returns 2 when MANOR_* settings are invalid."""
    # .env may carry MANOR_* overrides, including the log level below.
    load_dotenv()
    try:
        level  = log_level()
        config = load_game_config()
    except ValueError as exc:
        logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT)
        logger.error("Invalid configuration: %s", exc)
        print(f"Error: {exc}")
        return 2
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    run_cli(config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
