"""Tests for the Clue Inventory BST."""

import itertools
import random

from clue_inventory import (
    InOrderClues,
    contains_clue,
    count_clues,
    insert_clue,
    release_clues,
)


def build(texts):
    root = None
    for text in texts:
        root = insert_clue(root, text)
    return root


class TestInsert:

    def test_first_insert_creates_root(self):
        root = insert_clue(None, "knife")
        assert root.text == "knife"
        assert root.left is None and root.right is None

    def test_returns_same_root_afterwards(self):
        root = insert_clue(None, "m")
        assert insert_clue(root, "a") is root
        assert insert_clue(root, "z") is root

    def test_smaller_goes_left_larger_goes_right(self):
        root = build(["m", "a", "z"])
        assert root.left.text == "a"
        assert root.right.text == "z"

    def test_duplicate_is_ignored(self):
        root = build(["m", "a", "z"])
        before = list(InOrderClues(root))
        assert insert_clue(root, "a") is root
        assert list(InOrderClues(root)) == before
        assert count_clues(root) == 3

    def test_comparison_is_case_sensitive(self):
        root = build(["apple", "Apple"])
        assert list(InOrderClues(root)) == ["Apple", "apple"]
        assert count_clues(root) == 2

    def test_contains(self):
        root = build(["m", "a", "z"])
        assert contains_clue(root, "z")
        assert not contains_clue(root, "q")
        assert not contains_clue(None, "q")


class TestInOrder:

    def test_every_insertion_order_sorts(self):
        texts = ["pear", "apple", "fig", "kiwi"]
        for order in itertools.permutations(texts):
            assert list(InOrderClues(build(order))) == sorted(texts)

    def test_random_with_duplicates(self):
        rng = random.Random(7)
        texts = [rng.choice("abcdefghij") * rng.randint(1, 3) for _ in range(200)]
        result = list(InOrderClues(build(texts)))
        assert result == sorted(set(texts))

    def test_view_is_restartable(self):
        view = InOrderClues(build(["b", "a", "c"]))
        assert list(view) == ["a", "b", "c"]
        assert list(view) == ["a", "b", "c"]

    def test_empty(self):
        assert list(InOrderClues(None)) == []
        assert count_clues(None) == 0

    def test_degenerate_chain(self):
        texts = [f"{i:05d}" for i in range(3000)]
        root = build(texts)
        assert list(InOrderClues(root)) == texts


class TestRelease:

    def test_release_counts_nodes(self):
        root = build(["m", "a", "z", "b"])
        assert release_clues(root) == 4
        assert root.left is None and root.right is None

    def test_release_none(self):
        assert release_clues(None) == 0
