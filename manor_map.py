"""
manor_map.py
============
Construction and teardown of the Manor Map.

The map is a binary tree of Room nodes whose shape is fixed once built.
Navigation is entirely player-driven (see game_engine.py); nothing here
searches or rebalances the tree. The only mutation after construction is
the controller clearing a room's clue when it is collected.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from models import Room, RoomSpec

logger = logging.getLogger("manor_mystery.manor_map")


def build_room(name: str, clue: Optional[str] = None) -> Room:
    """
    Create a room with no exits.

    Args:
        name: Room name shown to the player.
        clue: Clue text left in the room, or None.

    Returns:
        A new leaf Room.
    """
    return Room(name=name, clue=clue)


def build_manor(spec: RoomSpec) -> Room:
    """
    Build the whole map described by a validated RoomSpec.

    Built top-down with an explicit work list so arbitrarily deep layouts do
    not hit the recursion limit.

    Args:
        spec: Root of the nested layout.

    Returns:
        The root Room (the entrance).
    """
    root = build_room(spec.name, spec.clue)
    pending: List[Tuple[Room, RoomSpec]] = [(root, spec)]
    built = 1
    while pending:
        room, room_spec = pending.pop()
        if room_spec.left is not None:
            room.left = build_room(room_spec.left.name, room_spec.left.clue)
            pending.append((room.left, room_spec.left))
            built += 1
        if room_spec.right is not None:
            room.right = build_room(room_spec.right.name, room_spec.right.clue)
            pending.append((room.right, room_spec.right))
            built += 1

    logger.debug("Manor built: root=%r, rooms=%d", root.name, built)
    return root


def count_rooms(root: Optional[Room]) -> int:
    """Return the number of rooms reachable from ``root``."""
    count = 0
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        count += 1
        stack.extend(room.children())
    return count


def release_manor(root: Optional[Room]) -> int:
    """
    Tear the map down in post-order: children, then the clue, then the room.

    Every released room has its links and clue cleared, so a stale handle
    left in a caller looks like an empty leaf.

    Args:
        root: Root of the map, or None.

    Returns:
        Number of rooms released.
    """
    if root is None:
        return 0

    released = 0
    stack: List[Tuple[Room, bool]] = [(root, False)]
    while stack:
        room, children_done = stack.pop()
        if not children_done:
            stack.append((room, True))
            if room.right is not None:
                stack.append((room.right, False))
            if room.left is not None:
                stack.append((room.left, False))
            continue
        room.left  = None
        room.right = None
        room.clue  = None
        released += 1

    logger.debug("Manor released: rooms=%d", released)
    return released
