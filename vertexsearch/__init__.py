"""Package exposing search strategy implementations over lazily generated vertices."""

from .common import CycleError, ScoredVertex, Vertex, reconstruct_path
from .bfs import bfs_search_all
from .astar import astar_search
from .count import count_paths

__all__ = [
    "Vertex",
    "ScoredVertex",
    "CycleError",
    "reconstruct_path",
    "bfs_search_all",
    "astar_search",
    "count_paths",
]
