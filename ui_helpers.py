"""
ui_helpers.py
=============
Stateless text formatting shared by the CLI, the controller's play loop and
the Streamlit interface.

These functions receive everything they need as arguments and return lines
of text; none of them prints or touches game state, so they can be tested in
isolation.

Contains:
  - banner_lines()      : opening banner and rules reminder
  - room_lines()        : "you are in" header plus the clue-found notice
  - direction_lines()   : available exits and the exit/accuse option
  - move_notice()       : feedback for a refused or exiting move
  - judgment_lines()    : judgment header, clue listing and suspect roster
  - verdict_lines()     : tally and final verdict
  - build_css()         : styling injected into the Streamlit page
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from models import Verdict

SEPARATOR = "-" * 40

DIRECTION_KEYS: Dict[str, str] = {"left": "l", "right": "r"}


def banner_lines(threshold: int) -> List[str]:
    return [
        "--- Manor Mystery: The Final Judgment ---",
        "Manor map and suspect directory loaded.",
        (
            f"The exploration begins. You need {threshold} clue(s) pointing at "
            "the same suspect to make an accusation stick."
        ),
    ]


def room_lines(room_name: str, collected: Optional[str] = None) -> List[str]:
    """
    Lines shown on entering a room.

    Args:
        room_name: Name of the room just entered.
        collected: Clue picked up on this visit, if any.
    """
    lines = ["", SEPARATOR, f"You are in: {room_name}"]
    if collected is not None:
        lines.append(f"[!] CLUE FOUND: {collected}")
    return lines


def direction_lines(directions: Dict[str, str]) -> List[str]:
    """
    Lines listing the exits of the current room.

    Args:
        directions: Mapping of "left" / "right" to the neighbouring room name,
                    as returned by ManorGame.available_directions().
    """
    lines = ["", "Choose your path:"]
    for direction in ("left", "right"):
        if direction in directions:
            key = DIRECTION_KEYS[direction]
            lines.append(f"  ({key}) {direction.capitalize()}: {directions[direction]}")
    if not directions:
        lines.append("  This room is a dead end.")
    lines.append("  (x) Exit and make the final accusation")
    return lines


def move_notice(reason: Optional[str], command: Optional[str]) -> Optional[str]:
    """
    Feedback line for a move that did not change rooms.

    Returns None for a successful move.
    """
    if reason == "invalid_command":
        return "Invalid command. Try 'left', 'right' or 'exit'."
    if reason == "no_path":
        return f"Oops! There is no path to the {command} here."
    if command == "exit":
        return "You head to the interrogation room to close the case..."
    return None


def judgment_lines(clues: Sequence[str], suspects: Sequence[str]) -> List[str]:
    """
    Header of the judgment phase.

    With no clues the case is lost on the spot and no suspect roster is shown.
    """
    lines = ["", "", "--- JUDGMENT PHASE ---"]
    if not clues:
        lines.append("You did not collect a single clue! The case is lost.")
        return lines
    lines.append("Collected clues (alphabetical order):")
    lines.extend(f"  - {clue}" for clue in clues)
    if suspects:
        lines.append("")
        lines.append(f"The suspects are: {', '.join(suspects)}.")
    return lines


def verdict_lines(verdict: Verdict) -> List[str]:
    """Tally and verdict lines. Empty for a lost case (nothing was tallied)."""
    if verdict.outcome == "case_lost":
        return []
    lines = [
        "",
        "--- THE VERDICT ---",
        (
            f"Checking... {verdict.match_count} clue(s) you found point to: "
            f"{verdict.accused}."
        ),
    ]
    if verdict.solved:
        lines.append("Enough evidence! You solved the mystery!")
        lines.append("CASE CLOSED.")
    else:
        lines.append("The accusation failed! The clues are not strong enough.")
        lines.append("The real culprit escaped...")
        lines.append("CASE FILED AWAY.")
    return lines


# ---------------------------------------------------------------------------
# Streamlit styling
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    .stApp { background: #101010; color: #c8c8c8; }
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Courier New', monospace; letter-spacing: 3px;
    }
    .room-card {
        background: #1c1c1c; padding: 20px; border-radius: 5px;
        border-left: 4px solid #8B0000; font-family: 'Courier New', monospace;
    }
    .clue-found { color: #d4a017; font-weight: bold; }
    .verdict-solved { color: #3c9d3c; font-size: 32px; text-align: center; }
    .verdict-failed { color: #8B0000; font-size: 32px; text-align: center; }
"""
