import logging
from collections import deque

from .common import reconstruct_path

logger = logging.getLogger(__name__)


def bfs_search_all(start, goal):
    """Breadth-First Search collecting a path for every goal vertex popped.

    Args:
        start: vertex the search expands from
        goal: vertex to reach; a popped vertex with `distance(goal) == 0` counts
    Returns:
        list of paths, each ordered goal first and ending at `start`;
        empty if the goal never shows up

    There is no visited set: every neighbour is queued again each time it is
    generated, so the structure reachable from `start` must be a finite DAG
    or the search never returns.
    """
    q = deque([start])
    came_from = {}
    paths = []
    nodes_popped = 0

    while q:
        node = q.popleft()
        nodes_popped += 1

        if node.distance(goal) == 0:
            paths.append(reconstruct_path(came_from, node))
            continue

        # later discoveries overwrite the predecessor of a neighbour
        for neighbor in node.neighbors():
            came_from[neighbor] = node
            q.append(neighbor)

    logger.debug(f"bfs_search_all: {len(paths)} paths after {nodes_popped} pops")
    return paths
