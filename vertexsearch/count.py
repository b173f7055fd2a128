import logging

from .common import CycleError

logger = logging.getLogger(__name__)


def count_paths(node):
    """Counts the walks from `node` down to vertices without neighbours.

    A vertex with no neighbours counts 1; any other vertex counts the sum over
    its neighbours, so reconverging branches are counted once per walk.
    Counts are memoised per vertex value for the duration of the call.

    Works from an explicit stack instead of recursion. A neighbour that is
    still being expanded further down the stack means the structure has a
    cycle, and CycleError is raised.
    """
    memo = {}
    expanding = {}  # vertex -> its neighbours, until its count is known
    stack = [node]

    while stack:
        current = stack[-1]
        if current in memo:
            stack.pop()
            continue

        children = expanding.get(current)
        if children is None:
            children = list(current.neighbors())
            if not children:
                memo[current] = 1
                stack.pop()
                continue
            expanding[current] = children
            for child in children:
                if child in expanding:
                    raise CycleError(child)
                if child not in memo:
                    stack.append(child)
            continue

        # all children resolved
        memo[current] = sum(memo[child] for child in children)
        del expanding[current]
        stack.pop()

    logger.debug(f"count_paths: {len(memo)} distinct vertices counted")
    return memo[node]
