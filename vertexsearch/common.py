from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Vertex(Protocol):
    """Anything the search strategies can walk over.

    Implementations must compare and hash by value: two independently
    generated vertices for the same logical node have to be equal and share
    a hash, otherwise the frontier and visited bookkeeping cannot merge them.
    `neighbors()` must be a pure function of the vertex value.
    """

    def neighbors(self) -> Sequence["Vertex"]:
        """Adjacent vertices, generated on demand."""
        ...

    def distance(self, other: "Vertex") -> float:
        """Non-negative estimate of the cost to reach `other`; 0 means arrived."""
        ...


@dataclass(order=True)
class ScoredVertex:
    """Frontier entry for a heapq: lowest score pops first, ties in push order."""
    score: float
    seq: int
    vertex: Any = field(compare=False)


class CycleError(ValueError):
    """Raised when a traversal that needs an acyclic structure meets a cycle."""

    def __init__(self, vertex):
        super().__init__(f"cycle detected at {vertex!r}")
        self.vertex = vertex


def reconstruct_path(came_from, current):
    """Walks the predecessor map back from `current`.

    Returns the path goal first, ending with the vertex that has no recorded
    predecessor (the start of the search).
    """
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    return path
