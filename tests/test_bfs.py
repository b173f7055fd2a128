"""Unit tests for the breadth-first all-paths search."""

from cartesian import Cartesian
from util import Grid
from vertexsearch import bfs_search_all


class TestBfsSearchAll:
    """Path enumeration on finite DAGs."""

    def test_single_chain(self, make_graph, names):
        """A chain yields one path, goal first."""
        g = make_graph({"a": ["b"], "b": ["c"]})
        assert [names(p) for p in bfs_search_all(g("a"), g("c"))] == [["c", "b", "a"]]

    def test_paths_start_and_end_correctly(self, make_graph):
        """Every path begins at the goal and finishes at the start."""
        g = make_graph({"s": ["a", "b"], "a": ["t"], "b": ["c", "t"], "c": ["t"]})
        paths = bfs_search_all(g("s"), g("t"))
        assert paths
        for path in paths:
            assert path[0] == g("t")
            assert path[-1] == g("s")

    def test_one_path_per_goal_pop(self, make_graph):
        """The goal is recorded each time it leaves the queue."""
        g = make_graph({"s": ["a", "b"], "a": ["t"], "b": ["c", "t"], "c": ["t"]})
        # s-a-t, s-b-t, s-b-c-t
        assert len(bfs_search_all(g("s"), g("t"))) == 3

    def test_predecessor_overwritten_before_pop(self, make_graph, names):
        """A later discovery replaces the predecessor used to rebuild a path."""
        g = make_graph({"s": ["a", "t"], "a": ["t"]})
        # a is expanded, pointing t at a, before the direct s -> t entry is popped
        paths = bfs_search_all(g("s"), g("t"))
        assert [names(p) for p in paths] == [["t", "a", "s"], ["t", "a", "s"]]

    def test_goal_not_expanded(self, make_graph):
        """The search stops expanding at the goal."""
        g = make_graph({"s": ["t"], "t": ["after"]})
        bfs_search_all(g("s"), g("t"))
        assert g.expansions["t"] == 0
        assert g.expansions["after"] == 0

    def test_start_is_goal(self, make_graph, names):
        """Start already at the goal yields the one-vertex path."""
        g = make_graph({"s": ["a"]})
        assert [names(p) for p in bfs_search_all(g("s"), g("s"))] == [["s"]]

    def test_unreachable_goal(self, make_graph):
        """No goal in a finite expansion gives an empty list."""
        g = make_graph({"s": ["a", "b"], "a": ["c"]})
        assert bfs_search_all(g("s"), g("zz")) == []

    def test_forward_grid(self):
        """On an east/north-only grid, every monotone walk is reported."""
        grid = Grid(3, 3, walls={Cartesian(1, 1)}, moves="forward")
        paths = bfs_search_all(grid.vertex(Cartesian(0, 0)), grid.vertex(Cartesian(2, 2)))
        assert len(paths) == 2
        assert all(len(p) == 5 for p in paths)
