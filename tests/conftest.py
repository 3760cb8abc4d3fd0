"""Pytest fixtures for Manor Mystery tests."""
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from config import GameConfig
from manor_map import build_room
from suspect_directory import SuspectDirectory


@pytest.fixture
def small_manor():
    """A("x") with children B("y") on the left and C (no clue) on the right."""
    root = build_room("A", "x")
    root.left = build_room("B", "y")
    root.right = build_room("C")
    return root


@pytest.fixture
def directory():
    d = SuspectDirectory(10)
    d.insert("x", "Butler")
    d.insert("y", "Butler")
    d.insert("z", "Countess")
    return d


@pytest.fixture
def config():
    return GameConfig()
