import heapq
import itertools
import logging
import math

from .common import ScoredVertex, reconstruct_path

logger = logging.getLogger(__name__)


def astar_search(start, goal):
    """
    Performs A* search for the shortest path from start to goal.
    Every edge costs 1; `distance()` is the heuristic and must be admissible
    and consistent for the result to be a shortest path.
    Args:
        start: vertex the search expands from
        goal: vertex to reach; a popped vertex with `distance(goal) == 0` ends the search
    Returns:
        path as a list ordered goal first and ending at `start`, or None
    """
    g_score = {start: 0}
    f_score = {start: start.distance(goal)}
    came_from = {}
    closed = set()
    counter = itertools.count()
    heap = []

    heapq.heappush(heap, ScoredVertex(f_score[start], next(counter), start))

    while heap:
        entry = heapq.heappop(heap)
        node = entry.vertex

        if node.distance(goal) == 0:
            logger.debug(f"astar_search: reached goal after closing {len(closed)} vertices")
            return reconstruct_path(came_from, node)

        # the cheapest entry for a vertex pops first and closes it, so any
        # later entry for a closed vertex is stale
        if node in closed:
            continue
        closed.add(node)

        for neighbor in node.neighbors():
            if neighbor in closed:
                continue
            tentative_g = g_score[node] + 1
            tentative_f = tentative_g + neighbor.distance(goal)
            heapq.heappush(heap, ScoredVertex(tentative_f, next(counter), neighbor))
            if tentative_g < g_score.get(neighbor, math.inf):
                g_score[neighbor] = tentative_g
                f_score[neighbor] = tentative_f
                came_from[neighbor] = node

    logger.debug(f"astar_search: frontier exhausted after closing {len(closed)} vertices")
    return None
