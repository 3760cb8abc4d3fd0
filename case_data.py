"""
case_data.py
============
All narrative content for the shipped case.

Centralising the story here means the whole mystery (rooms, clues, who each
clue points at) can be swapped without touching the data structures or the
controller.

To create a new case:
    1. Replace MANOR_LAYOUT with your own nested room tree.
    2. Replace SUSPECT_LEADS so every clue text matches a room's clue exactly.
    3. Keep the shapes identical; both are validated on import.
"""

from __future__ import annotations

from typing import List

from models import RoomSpec, SuspectLead


# ---------------------------------------------------------------------------
# Manor layout
# ---------------------------------------------------------------------------

MANOR_LAYOUT: RoomSpec = RoomSpec.model_validate({
    "name": "Entrance Hall",
    "left": {
        "name":  "Living Room",
        "clue":  "A crumpled tailor's receipt",
        "left":  {"name": "Library", "clue": "'The Art of Escape' pulled off the shelf"},
        "right": {"name": "Kitchen", "clue": "A uniform button on the floor"},
    },
    "right": {
        "name":  "Dining Room",
        "clue":  "An overturned wine glass",
        "left":  {"name": "Winter Garden", "clue": "Damp soil on the carpet"},
        "right": {"name": "Laboratory", "clue": "An empty poison vial"},
    },
})
"""
The fixed map. The entrance holds no clue; every other room holds one.
"""


# ---------------------------------------------------------------------------
# Suspect leads
# ---------------------------------------------------------------------------

SUSPECT_LEADS: List[SuspectLead] = [
    SuspectLead(clue="A crumpled tailor's receipt", suspect="Butler"),
    SuspectLead(clue="A uniform button on the floor", suspect="Butler"),

    SuspectLead(clue="An overturned wine glass", suspect="Countess"),
    SuspectLead(clue="An empty poison vial", suspect="Countess"),

    SuspectLead(clue="'The Art of Escape' pulled off the shelf", suspect="Gardener"),
    SuspectLead(clue="Damp soil on the carpet", suspect="Gardener"),
]
"""
Clue text -> suspect. Each suspect has exactly two clues, so any suspect can
be convicted by a player who finds both of theirs.
"""
