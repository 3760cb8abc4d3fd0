"""Consistency checks for the shipped case."""

from collections import Counter

from case_data import MANOR_LAYOUT, SUSPECT_LEADS
from manor_map import build_manor, count_rooms


def _room_clues(spec):
    stack, clues = [spec], []
    while stack:
        node = stack.pop()
        if node.clue is not None:
            clues.append(node.clue)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return clues


def test_every_clue_has_a_lead():
    lead_clues = {lead.clue for lead in SUSPECT_LEADS}
    assert set(_room_clues(MANOR_LAYOUT)) == lead_clues


def test_no_duplicate_leads():
    assert len({lead.clue for lead in SUSPECT_LEADS}) == len(SUSPECT_LEADS)


def test_each_suspect_can_reach_threshold():
    counts = Counter(lead.suspect for lead in SUSPECT_LEADS)
    assert counts == {"Butler": 2, "Countess": 2, "Gardener": 2}


def test_layout_builds():
    root = build_manor(MANOR_LAYOUT)
    assert root.name == "Entrance Hall"
    assert root.clue is None
    assert count_rooms(root) == 7
