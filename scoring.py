"""
scoring.py
==========
Deterministic, side-effect-free judgment logic.

Kept apart from the controller so the tally and the verdict rule can be
unit-tested without building a manor, and tuned only through GameConfig.
"""

from __future__ import annotations

from typing import Iterable

from config import GAME_CONFIG
from suspect_directory import SuspectDirectory


def same_suspect(a: str, b: str) -> bool:
    """Case-insensitive comparison of two suspect names."""
    return a.strip().lower() == b.strip().lower()


def tally_matches(
    clues:     Iterable[str],
    directory: SuspectDirectory,
    accused:   str,
) -> int:
    """
    Count the collected clues that incriminate ``accused``.

    Each clue is looked up in the directory by exact text. Clues with no
    entry count for nobody. The suspect name comparison ignores case, so
    "butler" matches "Butler".

    Args:
        clues:     Collected clue texts (usually the inventory in order).
        directory: Suspect Directory built at setup.
        accused:   Name typed by the player.

    Returns:
        Number of matching clues.

    Examples:
        >>> d = SuspectDirectory(10); d.insert("x", "Butler"); d.insert("y", "Butler")
        >>> tally_matches(["x", "y", "z"], d, "BUTLER")
        2
    """
    count = 0
    for clue in clues:
        suspect = directory.lookup(clue)
        if suspect is not None and same_suspect(suspect, accused):
            count += 1
    return count


def decide_outcome(match_count: int, threshold: int = GAME_CONFIG.accusation_threshold) -> str:
    """Return "solved" when ``match_count >= threshold``, else "unsolved"."""
    return "solved" if match_count >= threshold else "unsolved"
