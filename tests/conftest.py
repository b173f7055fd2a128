"""
Pytest configuration and shared fixtures.

Provides a small dictionary-backed vertex type so the search strategies can be
exercised on hand-written graphs, plus paths to the bundled grid problems.
"""

from collections import Counter
from pathlib import Path

import pytest


class DictGraph:
    """Adjacency dict handing out vertices by name and counting expansions."""

    def __init__(self, adjacency):
        self.adjacency = dict(adjacency)
        self.expansions = Counter()

    def __call__(self, name):
        return DictVertex(name, self)


class DictVertex:
    """Vertex of a DictGraph; distance is 0 to itself and 1 otherwise."""

    def __init__(self, name, graph):
        self.name = name
        self.graph = graph

    def neighbors(self):
        self.graph.expansions[self.name] += 1
        return [DictVertex(n, self.graph) for n in self.graph.adjacency.get(self.name, [])]

    def distance(self, other):
        return 0 if self.name == other.name else 1

    def __eq__(self, other):
        return isinstance(other, DictVertex) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"DictVertex({self.name!r})"


@pytest.fixture
def make_graph():
    """Return a factory building a DictGraph from an adjacency dict."""
    return DictGraph


@pytest.fixture
def names():
    """Return a helper turning a list of vertices into their names."""
    return lambda path: [v.name for v in path]


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def test_cases(project_root: Path) -> Path:
    """Return the bundled grid problem directory."""
    return project_root / "Test_Cases"


@pytest.fixture
def write_problem(tmp_path: Path):
    """Return a helper writing problem text to a temporary file and returning its path."""
    def _write(text, name="problem.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
