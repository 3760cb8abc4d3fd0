"""
game_engine.py
==============
Game controller for Manor Mystery.

Contains:
  ManorGame         - owns the Manor Map, the Clue Inventory root and the
                      Suspect Directory for one run, and drives the
                      exploration and judgment phases.
  parse_command()   - maps raw player input to "left" / "right" / "exit".
  CommandSource     - the one blocking interaction with the outside world.
  ScriptedCommands  - in-memory CommandSource for tests and replays.

Public API summary:
    new_game(config)             → ManorGame for the shipped case
    game = ManorGame(manor, directory)
    game.available_directions()  → {"left": name, "right": name}
    game.move(raw)               → MoveResult
    game.begin_judgment()        → [clue, ...] in ascending order
    game.judge(accusation)       → Verdict
    game.play(source, emit)      → Verdict
    game.close()                 → release counts

Logging
-------
The logger name for this module is ``manor_mystery.game_engine``. Handlers
are configured only by the entry points (cli.py, app.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from case_data import MANOR_LAYOUT, SUSPECT_LEADS
from clue_inventory import InOrderClues, count_clues, insert_clue, release_clues
from config import GAME_CONFIG, GameConfig
from manor_map import build_manor, release_manor
from models import ClueEntry, Room, Verdict
from scoring import decide_outcome, tally_matches
from suspect_directory import SuspectDirectory
from ui_helpers import (
    banner_lines,
    direction_lines,
    judgment_lines,
    move_notice,
    room_lines,
    verdict_lines,
)

logger = logging.getLogger("manor_mystery.game_engine")


# ---------------------------------------------------------------------------
# Phases and commands
# ---------------------------------------------------------------------------

PHASE_EXPLORING = "exploring"
PHASE_LEAF      = "leaf"
PHASE_JUDGING   = "judging"
PHASE_CONCLUDED = "concluded"

LEFT  = "left"
RIGHT = "right"
EXIT  = "exit"

_COMMAND_ALIASES: Dict[str, str] = {
    "left": LEFT, "l": LEFT, "e": LEFT,
    "right": RIGHT, "r": RIGHT, "d": RIGHT,
    "exit": EXIT, "x": EXIT, "s": EXIT,
}
"""
Accepted spellings, compared case-insensitively. e / d / s stand for
esquerda / direita / sair.
"""


def parse_command(raw: str) -> Optional[str]:
    """Return LEFT, RIGHT or EXIT for recognised input, otherwise None."""
    return _COMMAND_ALIASES.get(raw.strip().lower())


class GamePhaseError(RuntimeError):
    """Raised when an operation is called in a phase that does not allow it."""


@dataclass
class MoveResult:
    """
    Outcome of one player command during exploration.

    Attributes:
        command:   Parsed command, or None when the input was not recognised.
        moved:     True if the current room changed.
        room:      Current room after the command.
        reason:    "invalid_command" or "no_path" for refused moves, else None.
        collected: Clue picked up on arrival, if any.
    """

    command:   Optional[str]
    moved:     bool
    room:      Room
    reason:    Optional[str] = None
    collected: Optional[str] = None


class CommandSource(Protocol):
    """Where the controller reads player input from. Both calls may block."""

    def next_command(self) -> str: ...

    def next_accusation(self) -> str: ...


class ScriptedCommands:
    """
    CommandSource backed by a fixed list of commands and one accusation.

    Running out of commands raises EOFError, the same as an exhausted stdin.
    """

    def __init__(self, commands: Iterable[str], accusation: Optional[str] = None) -> None:
        self._commands   = list(commands)
        self._accusation = accusation
        self.accusation_requested = False

    def next_command(self) -> str:
        if not self._commands:
            raise EOFError("no scripted commands left")
        return self._commands.pop(0)

    def next_accusation(self) -> str:
        self.accusation_requested = True
        if self._accusation is None:
            raise EOFError("no scripted accusation")
        return self._accusation


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class ManorGame:
    """
    Controller for one investigation.

    The map and directory are built by the caller and handed in; the game
    owns them from then on and releases them in close(). The inventory root
    is replaced after every insertion, so always read it through ``clues``.

    Attributes:
        config:    Rules in force (threshold, leaf behaviour).
        directory: Suspect Directory, read-only during play.
        last_move: Result of the most recent arrival or command. Right after
                   construction it describes entering the first room.
        verdict:   Set once judge() has run.
    """

    def __init__(
        self,
        manor:     Room,
        directory: SuspectDirectory,
        clues:     Optional[ClueEntry] = None,
        config:    GameConfig = GAME_CONFIG,
    ) -> None:
        self.config    = config
        self.directory = directory
        self.verdict: Optional[Verdict] = None

        self._manor: Optional[Room]      = manor
        self._room:  Room                = manor
        self._clues: Optional[ClueEntry] = clues
        self._phase: str                 = PHASE_EXPLORING

        logger.info(
            "ManorGame initialised: entrance=%r, directory_entries=%d, threshold=%d",
            manor.name,
            len(directory),
            config.accusation_threshold,
        )

        collected = self._arrive(manor)
        self.last_move = MoveResult(
            command=None, moved=True, room=manor, collected=collected
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def phase(self) -> str:
        return self._phase

    @property
    def current_room(self) -> Room:
        return self._room

    @property
    def clues(self) -> Optional[ClueEntry]:
        """Current root of the Clue Inventory."""
        return self._clues

    @property
    def is_exploring(self) -> bool:
        return self._phase in (PHASE_EXPLORING, PHASE_LEAF)

    @property
    def is_leaf(self) -> bool:
        """True while standing in a dead end that has not ended exploration."""
        return self._phase == PHASE_LEAF

    def collected_clues(self) -> List[str]:
        """Collected clue texts in ascending order."""
        return list(InOrderClues(self._clues))

    def available_directions(self) -> Dict[str, str]:
        """Map "left" / "right" to the name of each existing neighbour."""
        directions: Dict[str, str] = {}
        if self._room.left is not None:
            directions[LEFT] = self._room.left.name
        if self._room.right is not None:
            directions[RIGHT] = self._room.right.name
        return directions

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    def _arrive(self, room: Room) -> Optional[str]:
        """Enter ``room``: collect its clue if it still has one, update phase."""
        self._room = room
        logger.debug("Entered room %r", room.name)

        collected = None
        if room.clue is not None:
            collected   = room.clue
            self._clues = insert_clue(self._clues, collected)
            room.clue   = None
            logger.info(
                "Clue collected in %r: %r (inventory size=%d)",
                room.name,
                collected,
                count_clues(self._clues),
            )

        if room.is_leaf:
            if self.config.stop_at_leaf:
                logger.info("Dead end at %r; exploration over.", room.name)
                self._phase = PHASE_JUDGING
            else:
                self._phase = PHASE_LEAF
        else:
            self._phase = PHASE_EXPLORING
        return collected

    def move(self, raw: str) -> MoveResult:
        """
        Apply one player command.

        Unknown input and moves toward a missing neighbour leave everything
        unchanged and are reported through the result, never raised.

        Raises:
            GamePhaseError: If exploration is already over.
        """
        if not self.is_exploring:
            raise GamePhaseError(f"cannot move during phase {self._phase!r}")

        command = parse_command(raw)
        if command is None:
            logger.info("Invalid command %r in room %r", raw, self._room.name)
            result = MoveResult(None, False, self._room, reason="invalid_command")
        elif command == EXIT:
            logger.info("Player left %r to make the accusation.", self._room.name)
            self._phase = PHASE_JUDGING
            result = MoveResult(EXIT, False, self._room)
        else:
            target = self._room.left if command == LEFT else self._room.right
            if target is None:
                logger.info("No path %s from %r", command, self._room.name)
                result = MoveResult(command, False, self._room, reason="no_path")
            else:
                collected = self._arrive(target)
                result = MoveResult(command, True, target, collected=collected)

        self.last_move = result
        return result

    # ------------------------------------------------------------------
    # Judgment
    # ------------------------------------------------------------------

    def begin_judgment(self) -> List[str]:
        """
        Return the clue listing that opens the judgment phase.

        An empty list means there is no evidence and no accusation will be
        taken.

        Raises:
            GamePhaseError: If exploration has not ended.
        """
        if self._phase != PHASE_JUDGING:
            raise GamePhaseError(f"judgment not open during phase {self._phase!r}")
        clues = self.collected_clues()
        logger.info("Judgment phase opened with %d clue(s).", len(clues))
        return clues

    def judge(self, accusation: Optional[str]) -> Verdict:
        """
        Tally the inventory against ``accusation`` and close the case.

        With an empty inventory the accusation is ignored and the case is lost.

        Raises:
            GamePhaseError: If called outside the judgment phase (including a
                            second call after a verdict).
        """
        if self._phase != PHASE_JUDGING:
            raise GamePhaseError(f"cannot judge during phase {self._phase!r}")

        threshold = self.config.accusation_threshold
        clues     = self.collected_clues()

        if not clues:
            verdict = Verdict(outcome="case_lost", threshold=threshold)
        else:
            accused = (accusation or "").strip()
            matches = tally_matches(InOrderClues(self._clues), self.directory, accused)
            verdict = Verdict(
                outcome=decide_outcome(matches, threshold),
                accused=accused,
                match_count=matches,
                threshold=threshold,
                clues=clues,
            )

        self._phase  = PHASE_CONCLUDED
        self.verdict = verdict
        logger.info(
            "Verdict: outcome=%s, accused=%r, matches=%s, threshold=%d",
            verdict.outcome,
            verdict.accused,
            verdict.match_count,
            threshold,
        )
        return verdict

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    def play(
        self,
        source: CommandSource,
        emit:   Callable[[str], None] = print,
    ) -> Verdict:
        """
        Run exploration and judgment to the end against ``source``.

        Every status line goes through ``emit``. End of input counts as
        "exit" while exploring and as an empty accusation while judging.

        Returns:
            The final Verdict.
        """
        for line in banner_lines(self.config.accusation_threshold):
            emit(line)
        for line in room_lines(self._room.name, self.last_move.collected):
            emit(line)

        while self.is_exploring:
            for line in direction_lines(self.available_directions()):
                emit(line)
            try:
                raw = source.next_command()
            except EOFError:
                raw = EXIT
            result = self.move(raw)
            if result.moved:
                for line in room_lines(result.room.name, result.collected):
                    emit(line)
            else:
                notice = move_notice(result.reason, result.command)
                if notice:
                    emit(notice)

        clues = self.begin_judgment()
        for line in judgment_lines(clues, self.directory.suspects()):
            emit(line)
        if not clues:
            return self.judge(None)

        try:
            accusation = source.next_accusation()
        except EOFError:
            accusation = ""
        verdict = self.judge(accusation)
        for line in verdict_lines(verdict):
            emit(line)
        return verdict

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def close(self) -> Dict[str, int]:
        """
        Release the map, the inventory and the directory.

        Returns:
            Counts of released rooms, clues and directory entries.
        """
        released = {
            "rooms":   release_manor(self._manor),
            "clues":   release_clues(self._clues),
            "entries": self.directory.release(),
        }
        self._manor = None
        self._clues = None
        logger.debug("Game resources released: %s", released)
        return released


def new_game(config: GameConfig = GAME_CONFIG) -> ManorGame:
    """Build the shipped case (map, directory) and a controller for it."""
    directory = SuspectDirectory.from_leads(SUSPECT_LEADS, config.bucket_count)
    return ManorGame(build_manor(MANOR_LAYOUT), directory, config=config)
