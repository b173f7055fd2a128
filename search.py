import argparse
import logging
import sys
import time
import tracemalloc

import psutil

import constants
from util import GridReader, FormatBytes
from vertexsearch import astar_search, bfs_search_all, count_paths

logger = logging.getLogger(__name__)


# --- 1. Search runners over a Grid ---

def run_bfs(grid):
    """All paths from origin to destination, each ordered destination first."""
    return bfs_search_all(grid.vertex(grid.origin), grid.vertex(grid.destination))


def run_astar(grid):
    """Shortest path from origin to destination ordered destination first, or None."""
    return astar_search(grid.vertex(grid.origin), grid.vertex(grid.destination))


def run_count(grid):
    """Number of walks from the origin to cells without any further move."""
    return count_paths(grid.vertex(grid.origin))


RUNNERS = {
    constants.METHOD_BFS: run_bfs,
    constants.METHOD_ASTAR: run_astar,
    constants.METHOD_COUNT: run_count,
}


def format_path(path):
    """Renders a destination-first path as 'origin -> ... -> destination'."""
    return " -> ".join(str(v) for v in reversed(path))


def check_problem(grid, method):
    """Returns an error message when `method` cannot run on `grid`, else None."""
    if grid.origin is None:
        return "Problem has no origin"
    if not grid.is_open(grid.origin):
        return f"Origin {grid.origin} is a wall or outside the grid"
    if method != constants.METHOD_COUNT:
        if grid.destination is None:
            return "Problem has no destination"
        if not grid.is_open(grid.destination):
            return f"Destination {grid.destination} is a wall or outside the grid"
    if method in constants.ACYCLIC_ONLY_METHODS and not grid.is_acyclic:
        return (f"Method {method} needs an acyclic grid (Moves: {constants.MOVES_FORWARD}), "
                f"got Moves: {grid.moves}")
    return None


# --- 2. Metrics ---

def execute_with_metrics(run_fn, grid):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn(grid)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def _metrics_line(method, runtime_s, peak_bytes, rss_after, path_length=None):
    return (
        f"Metrics: method={method} "
        f"path_length={path_length if path_length is not None else 'N/A'} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)} "
        f"rss_now={FormatBytes(rss_after)}"
    )


# --- 3. Main Program Structure (Entry Point) ---

def main(filename, method, metrics_mode="none"):
    """Read a grid problem, run one search method on it and print the result.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the result

    Returns the process exit status.
    """
    method = method.upper()
    run_fn = RUNNERS.get(method)
    if run_fn is None:
        print(f"Unknown method: {method}")
        print(f"Methods: {', '.join(constants.METHODS)}")
        return 1

    try:
        grid = GridReader(filename).read_problem()
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 1

    problem = check_problem(grid, method)
    if problem is not None:
        print(f"Error: {problem}")
        return 1

    logger.info(f"Loaded {grid.width}x{grid.height} grid, origin {grid.origin}, "
                f"destination {grid.destination}, moves {grid.moves}")

    result, runtime_s, peak_bytes, rss_after = execute_with_metrics(run_fn, grid)

    # Expected output:
    # <filename> <method>
    # <result lines>
    print(f"{filename} {method}")
    path_length = None
    if method == constants.METHOD_COUNT:
        print(f"Number of paths:{result}")
    elif method == constants.METHOD_BFS:
        print(f"Number of paths found:{len(result)}")
        if result:
            shortest = min(result, key=len)
            path_length = grid.path_length(shortest)
            print(f"Shortest path:{format_path(shortest)}")
        else:
            print("None")
    else:
        if result is None:
            print("None")
        else:
            path_length = grid.path_length(result)
            print(f"Path found:{format_path(result)}")
            print(f"Number of moves:{path_length}")

    # Metrics (printed separately so the result format remains intact)
    if metrics_mode in ("stderr", "stdout"):
        line = _metrics_line(method, runtime_s, peak_bytes, rss_after, path_length)
        if metrics_mode == "stdout":
            print(line)
        else:
            print(line, file=sys.stderr)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Search a grid problem file")
    parser.add_argument("filename", help=f"Grid problem file, e.g. {constants.TEST_CASE_FOLDER}/maze.txt")
    parser.add_argument("method", help=f"Search method: {', '.join(constants.METHODS)}")
    parser.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr",
                        default="none", help="Print a metrics line to stderr")
    parser.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                        help="Print a metrics line to stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def cli(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else constants.LOG_LEVEL,
        format=constants.LOG_FORMAT,
        datefmt=constants.LOG_DATEFMT,
    )
    return main(args.filename, args.method, args.metrics_mode)


if __name__ == "__main__":
    # e.g., python search.py Test_Cases/maze.txt AS --metrics
    sys.exit(cli())
