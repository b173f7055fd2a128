import argparse
import sys

import matplotlib.pyplot as plt

import constants
from search import RUNNERS, check_problem
from util import GridReader


def path_positions(grid, method):
    """Positions of the path a method finds, origin first; empty when there is none.

    COUNT has no path to draw; BFS contributes its shortest path.
    """
    if method == constants.METHOD_COUNT:
        return []
    result = RUNNERS[method](grid)
    if method == constants.METHOD_BFS:
        result = min(result, key=len) if result else None
    if result is None:
        return []
    return [v.pos for v in reversed(result)]


def draw_grid(grid, path=None, title="Grid Visualization"):
    """Draw the grid cells, walls, origin, destination and an optional path.

    Args:
        grid: Grid to draw
        path: list of Cartesian positions, origin first
        title: figure title

    Returns:
        the matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=constants.FIGURE_SIZE)

    # Walls as filled squares centred on their cell
    for wall in grid.walls:
        ax.add_patch(plt.Rectangle((wall.x - 0.5, wall.y - 0.5), 1, 1,
                                   color=constants.WALL_COLOR, zorder=1))

    if path:
        ax.plot([p.x for p in path], [p.y for p in path], color=constants.PATH_COLOR,
                linewidth=3, marker='o', zorder=2, label=f"path ({len(path) - 1} moves)")

    # Highlight origin + destination
    if grid.origin is not None:
        ax.scatter(grid.origin.x, grid.origin.y, s=400, color='lightgreen',
                   edgecolor='darkgreen', linewidth=3, zorder=3, label="origin")
    if grid.destination is not None:
        ax.scatter(grid.destination.x, grid.destination.y, s=400, color='lightcoral',
                   edgecolor='darkred', linewidth=3, zorder=3, label="destination")

    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(-0.5, grid.height - 0.5)
    ax.set_xticks(range(grid.width))
    ax.set_yticks(range(grid.height))
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.set_title(title, fontsize=18, fontweight='bold', pad=20)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
    fig.tight_layout()
    return fig


def main(filename, method=None, out=None):
    try:
        grid = GridReader(filename).read_problem()
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 1

    path = None
    title = f"{filename}"
    if method is not None:
        method = method.upper()
        if method not in RUNNERS:
            print(f"Unknown method: {method}")
            return 1
        problem = check_problem(grid, method)
        if problem is not None:
            print(f"Error: {problem}")
            return 1
        path = path_positions(grid, method)
        title = f"{filename} {method}"

    fig = draw_grid(grid, path, title)
    if out:
        fig.savefig(out)
        plt.close(fig)
        print(f"Saved figure to {out}")
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    # e.g., python seegrid.py Test_Cases/maze.txt AS --out maze.png
    parser = argparse.ArgumentParser(description="Draw a grid problem file and optionally a found path")
    parser.add_argument("filename", help="Grid problem file")
    parser.add_argument("method", nargs="?", help="Search method whose path is drawn")
    parser.add_argument("--out", help="Save the figure here instead of showing it")
    args = parser.parse_args()
    sys.exit(main(args.filename, args.method, args.out))
