import argparse
import logging
import sys

import pandas as pd

import constants
from search import RUNNERS, execute_with_metrics, check_problem
from util import GridReader, FormatBytes

logger = logging.getLogger(__name__)

COLUMNS = ['method', 'outcome', 'path_length', 'runtime_ms', 'peak_py_mem']


def _outcome(grid, method, result):
    """Summarise a runner result as (outcome text, path length or None)."""
    if method == constants.METHOD_COUNT:
        return f"{result} paths", None
    if method == constants.METHOD_BFS:
        if not result:
            return "no path", None
        return f"{len(result)} paths", grid.path_length(min(result, key=len))
    if result is None:
        return "no path", None
    return "path", grid.path_length(result)


def compare_methods(grid, methods=constants.METHODS):
    """Run every applicable method on the grid.

    Methods that cannot run on the grid (see search.check_problem) are left
    out with a log record instead of a row.

    Returns:
        DataFrame with one row per method run (columns: method, outcome,
        path_length, runtime_ms, peak_py_mem)
    """
    rows = []
    for method in methods:
        problem = check_problem(grid, method)
        if problem is not None:
            logger.info(f"Skipping {method}: {problem}")
            continue
        result, runtime_s, peak_bytes, _rss = execute_with_metrics(RUNNERS[method], grid)
        outcome, path_length = _outcome(grid, method, result)
        rows.append({
            'method': method,
            'outcome': outcome,
            'path_length': path_length,
            'runtime_ms': round(runtime_s * 1000, 3),
            'peak_py_mem': FormatBytes(peak_bytes),
        })
    df = pd.DataFrame(rows, columns=COLUMNS)
    # Int64 keeps missing lengths as <NA> rather than turning the column into floats
    df['path_length'] = df['path_length'].astype('Int64')
    return df


def main(filename):
    """Compare all search methods on one grid problem file and print the table."""
    try:
        grid = GridReader(filename).read_problem()
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 1

    df = compare_methods(grid)
    print(f"Problem File: {filename}, Moves: {grid.moves}")
    print(f"Origin: {grid.origin}")
    print(f"Destination: {grid.destination}")
    if df.empty:
        print("No method could run on this problem")
        return 1
    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    # e.g., python compare.py Test_Cases/forward.txt
    parser = argparse.ArgumentParser(description="Compare search methods on a grid problem file")
    parser.add_argument("filename", help="Grid problem file")
    args = parser.parse_args()
    logging.basicConfig(level=constants.LOG_LEVEL, format=constants.LOG_FORMAT, datefmt=constants.LOG_DATEFMT)
    sys.exit(main(args.filename))
