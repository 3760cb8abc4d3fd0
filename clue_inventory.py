"""
clue_inventory.py
=================
The Clue Inventory: a binary search tree of collected clue texts.

The tree is ordered by plain (case-sensitive) string comparison and never
holds the same text twice. It is not rebalanced. Whoever owns the inventory
holds the root handle and must store back whatever ``insert_clue`` returns,
because the first insertion into an empty inventory creates the root.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from models import ClueEntry

logger = logging.getLogger("manor_mystery.clue_inventory")


def insert_clue(root: Optional[ClueEntry], text: str) -> ClueEntry:
    """
    Insert ``text`` and return the root of the resulting tree.

    Smaller texts go left, larger texts go right, an equal text is ignored.
    Inserting the same clue twice is a no-op, never an error.

    Args:
        root: Current root, or None for an empty inventory.
        text: Clue text to store.

    Returns:
        The root to keep: a brand-new node when ``root`` was None, otherwise
        ``root`` itself.
    """
    if root is None:
        logger.debug("Inventory root created: %r", text)
        return ClueEntry(text)

    node = root
    while True:
        if text < node.text:
            if node.left is None:
                node.left = ClueEntry(text)
                break
            node = node.left
        elif text > node.text:
            if node.right is None:
                node.right = ClueEntry(text)
                break
            node = node.right
        else:
            logger.debug("Clue already in inventory, ignored: %r", text)
            break
    return root


def contains_clue(root: Optional[ClueEntry], text: str) -> bool:
    """Return True if ``text`` is stored in the inventory."""
    node = root
    while node is not None:
        if text < node.text:
            node = node.left
        elif text > node.text:
            node = node.right
        else:
            return True
    return False


class InOrderClues:
    """
    Iterable view of the inventory in ascending order.

    Each call to ``iter()`` starts a fresh left / node / right walk, so the
    same view can be listed for display and then walked again for the tally.
    The view is lazy: nodes are visited as the caller advances.
    """

    def __init__(self, root: Optional[ClueEntry]) -> None:
        self._root = root

    def __iter__(self) -> Iterator[str]:
        stack: List[ClueEntry] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right


def count_clues(root: Optional[ClueEntry]) -> int:
    """Return the number of distinct clues stored."""
    return sum(1 for _ in InOrderClues(root))


def release_clues(root: Optional[ClueEntry]) -> int:
    """
    Tear the inventory down in post-order.

    Returns:
        Number of nodes released.
    """
    if root is None:
        return 0

    released = 0
    stack: List[Tuple[ClueEntry, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
            continue
        node.left  = None
        node.right = None
        released += 1

    logger.debug("Inventory released: nodes=%d", released)
    return released
