"""
suspect_directory.py
====================
The Suspect Directory: a hash table from clue text to suspect name.

Collisions are resolved by chaining. The number of buckets is chosen at
construction and never changes; the table is filled once during setup and
only read while the game runs.

Hashing uses djb2 (seed 5381, ``hash * 33 + byte``) over the UTF-8 bytes of
the key, with the running value kept to 64 unsigned bits, reduced modulo the
bucket count. Bucket indexes never reach the player, so the exact function
only matters for reproducing chain layouts.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from models import SuspectEntry, SuspectLead

logger = logging.getLogger("manor_mystery.suspect_directory")

DJB2_SEED = 5381
_MASK_64  = (1 << 64) - 1


def djb2_hash(key: str, bucket_count: int) -> int:
    """
    Return the bucket index of ``key`` in ``[0, bucket_count)``.

    >>> djb2_hash("", 10)
    1
    """
    value = DJB2_SEED
    for byte in key.encode("utf-8"):
        value = (value * 33 + byte) & _MASK_64
    return value % bucket_count


class SuspectDirectory:
    """
    Chained hash table mapping clue text to the suspect it incriminates.

    Attributes:
        bucket_count: Number of chains, fixed at construction.
    """

    def __init__(self, bucket_count: int) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self._bucket_count = bucket_count
        self._buckets: List[Optional[SuspectEntry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_leads(
        cls, leads: Iterable[SuspectLead], bucket_count: int
    ) -> SuspectDirectory:
        """Build a directory holding every lead, inserted in the given order."""
        directory = cls(bucket_count)
        for lead in leads:
            directory.insert(lead.clue, lead.suspect)
        logger.debug(
            "Suspect directory built: entries=%d, buckets=%d",
            len(directory),
            bucket_count,
        )
        return directory

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    def __len__(self) -> int:
        return self._size

    def bucket_of(self, key: str) -> int:
        if not self._buckets:
            raise RuntimeError("suspect directory has been released")
        return djb2_hash(key, self._bucket_count)

    def insert(self, key: str, value: str) -> None:
        """
        Prepend ``key -> value`` to its bucket's chain.

        An existing entry with the same key is not replaced; the new one
        shadows it because lookups walk the chain from the head.
        """
        index = self.bucket_of(key)
        self._buckets[index] = SuspectEntry(key, value, self._buckets[index])
        self._size += 1

    def lookup(self, key: str) -> Optional[str]:
        """Return the suspect for ``key`` (exact, case-sensitive) or None."""
        entry = self._buckets[self.bucket_of(key)]
        while entry is not None:
            if entry.clue_text == key:
                return entry.suspect
            entry = entry.next
        return None

    def chain(self, index: int) -> List[str]:
        """
        Keys stored in bucket ``index``, head first.

        Raises:
            IndexError: Unless ``0 <= index < bucket_count``.
        """
        if not 0 <= index < len(self._buckets):
            raise IndexError(f"bucket index {index} out of range")
        keys: List[str] = []
        entry = self._buckets[index]
        while entry is not None:
            keys.append(entry.clue_text)
            entry = entry.next
        return keys

    def suspects(self) -> List[str]:
        """Distinct suspect names in the directory, sorted."""
        names = set()
        for head in self._buckets:
            entry = head
            while entry is not None:
                names.add(entry.suspect)
                entry = entry.next
        return sorted(names)

    def release(self) -> int:
        """
        Free every chain, then the bucket array.

        The directory is unusable afterwards: its bucket count drops to zero.

        Returns:
            Number of entries released.
        """
        released = 0
        for index, head in enumerate(self._buckets):
            entry = head
            while entry is not None:
                following  = entry.next
                entry.next = None
                entry      = following
                released  += 1
            self._buckets[index] = None
        self._buckets      = []
        self._bucket_count = 0
        self._size         = 0
        logger.debug("Suspect directory released: entries=%d", released)
        return released
