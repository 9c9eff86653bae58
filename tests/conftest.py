"""Pytest fixtures for pathgeom tests."""

import os
import tempfile

import pytest

from pathgeom.geometry.path import Path
from pathgeom.geometry.point import Point
from pathgeom.tracer import configure_tracer


@pytest.fixture(autouse=True)
def quiet_tracer():
    """Keep the global tracer disabled between tests."""
    configure_tracer(enabled=False)
    yield
    configure_tracer(enabled=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def unit_square():
    """Closed straight square from (0, 0) to (1, 1)."""
    return Path([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)], closed=True)


@pytest.fixture
def cubic_path():
    """One cubic segment whose curve bulges above its anchors."""
    return Path([
        Point(0, 0, next=Point(2, 10), is_move_to=True),
        Point(10, 0, prev=Point(8, 10)),
    ])


@pytest.fixture
def quadratic_path():
    """One quadratic segment bulging below its anchors."""
    return Path([
        Point(0, 0, is_move_to=True),
        Point(10, 0, prev=Point(5, -8)),
    ])


@pytest.fixture
def mixed_path():
    """Open path mixing lines, a quadratic and a cubic, plus a second subpath."""
    return Path([
        Point(0, 0, is_move_to=True),
        Point(10, 0, next=Point(12, 5)),
        Point(20, 5, prev=Point(18, 12)),
        Point(25, -5, prev=Point(30, 0)),
        Point(40, 40, is_move_to=True),
        Point(45, 42),
    ])


@pytest.fixture
def config_file(temp_dir):
    """Write a partial YAML config and return its path."""
    path = os.path.join(temp_dir, "pathgeom.yaml")
    with open(path, "w", encoding="utf-8") as f:
        f.write("codec:\n  precision: 1\nflatten:\n  steps: 10\nunknown_section:\n  a: 1\n")
    return path
