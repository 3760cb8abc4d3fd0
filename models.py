"""
models.py
=========
Shared data models for Manor Mystery.

Contains:
  - Room          : Manor Map node (fixed-shape binary tree of rooms).
  - ClueEntry     : Clue Inventory node (binary search tree keyed by clue text).
  - SuspectEntry  : Suspect Directory chain node (clue text -> suspect name).
  - RoomSpec      : Pydantic schema for a nested manor layout.
  - SuspectLead   : Pydantic schema for one clue/suspect association.
  - Verdict       : Pydantic schema for the outcome of the judgment phase.

The node types are plain dataclasses: every child link is owned by exactly one
parent and is released explicitly by the matching ``release_*`` routine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Manor Map node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    One room of the manor.

    Attributes:
        name:  Display name shown to the player on every entry.
        clue:  Clue text waiting in this room, or None once collected
               (or if the room never held one).
        left:  Room reached by going left, if any.
        right: Room reached by going right, if any.
    """

    name:  str
    clue:  Optional[str]  = None
    left:  Optional[Room] = field(default=None, repr=False)
    right: Optional[Room] = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        """True when the room has no exits."""
        return self.left is None and self.right is None

    def children(self) -> Iterator[Room]:
        """Yield the existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


# ---------------------------------------------------------------------------
# Clue Inventory node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ClueEntry:
    """A collected clue. ``left`` holds smaller texts, ``right`` larger ones."""

    text:  str
    left:  Optional[ClueEntry] = field(default=None, repr=False)
    right: Optional[ClueEntry] = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Suspect Directory chain node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class SuspectEntry:
    """One key/value pair in a bucket's singly linked collision chain."""

    clue_text: str
    suspect:   str
    next:      Optional[SuspectEntry] = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Validated construction input
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    Validated description of a manor layout, nested the same way as the map.

    Fields:
        name:  Non-empty room name.
        clue:  Optional clue text left in the room. Empty strings are rejected
               so "no clue" is always spelled ``None``.
        left:  Optional spec of the left child.
        right: Optional spec of the right child.
    """

    name:  str = Field(min_length=1)
    clue:  Optional[str] = Field(default=None, min_length=1)
    left:  Optional[RoomSpec] = None
    right: Optional[RoomSpec] = None


RoomSpec.model_rebuild()


class SuspectLead(BaseModel):
    """A clue text and the suspect it incriminates."""

    clue:    str = Field(min_length=1)
    suspect: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Judgment outcome
# ---------------------------------------------------------------------------

class Verdict(BaseModel):
    """
    Result of the judgment phase.

    Fields:
        outcome:     "solved" when the tally reached the threshold, "unsolved"
                     when it did not, "case_lost" when no clue was collected
                     and no accusation was taken.
        accused:     The name the player accused, as typed. None for case_lost.
        match_count: Number of collected clues pointing at the accused.
                     None for case_lost (no tally is performed).
        threshold:   The accusation threshold in force.
        clues:       Collected clue texts in ascending order.
    """

    outcome:     Literal["solved", "unsolved", "case_lost"]
    accused:     Optional[str] = None
    match_count: Optional[int] = None
    threshold:   int
    clues:       List[str] = Field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.outcome == "solved"
