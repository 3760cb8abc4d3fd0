"""Tests for the Manor Map: construction, counting and release."""

import pytest
from pydantic import ValidationError

from manor_map import build_manor, build_room, count_rooms, release_manor
from models import RoomSpec


class TestBuildRoom:

    def test_leaf_without_clue(self):
        room = build_room("Hall")
        assert room.name == "Hall"
        assert room.clue is None
        assert room.left is None and room.right is None
        assert room.is_leaf

    def test_leaf_with_clue(self):
        room = build_room("Study", "ink stain")
        assert room.clue == "ink stain"
        assert list(room.children()) == []


class TestBuildManor:

    def test_shape_follows_layout(self):
        spec = RoomSpec.model_validate({
            "name": "A",
            "clue": "x",
            "left": {"name": "B", "clue": "y", "left": {"name": "D"}},
            "right": {"name": "C"},
        })
        root = build_manor(spec)
        assert root.name == "A" and root.clue == "x"
        assert root.left.name == "B" and root.left.clue == "y"
        assert root.left.left.name == "D"
        assert root.left.right is None
        assert root.right.name == "C" and root.right.clue is None
        assert count_rooms(root) == 4

    def test_deep_layout_does_not_recurse(self):
        spec = RoomSpec(name="room-0")
        node = spec
        for i in range(1, 2000):
            node.left = RoomSpec(name=f"room-{i}")
            node = node.left
        root = build_manor(spec)
        assert count_rooms(root) == 2000

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            RoomSpec.model_validate({"name": ""})

    def test_empty_clue_rejected(self):
        with pytest.raises(ValidationError):
            RoomSpec.model_validate({"name": "Hall", "clue": ""})


class TestRelease:

    def test_releases_every_room(self, small_manor):
        left = small_manor.left
        assert release_manor(small_manor) == 3
        assert small_manor.left is None and small_manor.right is None
        assert small_manor.clue is None
        assert left.clue is None

    def test_release_none(self):
        assert release_manor(None) == 0

    def test_count_none(self):
        assert count_rooms(None) == 0
