import logging
from dataclasses import dataclass, field

import constants
from cartesian import Cartesian, CoordinateParseError

logger = logging.getLogger(__name__)


class Grid:
    """Represents a bounded grid of cells, some of them walls."""
    def __init__(self, width=0, height=0, walls=None, moves=constants.DEFAULT_MOVES):
        self.width = width
        self.height = height
        self.walls = set(walls) if walls else set()   # {Cartesian, ...}
        self.moves = moves                             # one of constants.MOVE_RULES
        self.origin = None                             # Cartesian
        self.destination = None                        # Cartesian

    def in_bounds(self, pos):
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_open(self, pos):
        """True for an in-bounds cell that is not a wall."""
        return self.in_bounds(pos) and pos not in self.walls

    @property
    def is_acyclic(self):
        """Only the forward move rule guarantees the grid has no cycles."""
        return self.moves == constants.MOVES_FORWARD

    def vertex(self, pos):
        """Wraps a position so the search strategies can walk from it."""
        return GridVertex(pos, self)

    def steps_from(self, pos):
        """Candidate cells reachable from `pos` in one move, walls not yet removed."""
        if self.moves == constants.MOVES_8:
            return pos.neigh8()
        if self.moves == constants.MOVES_FORWARD:
            # north and east only
            return [p for p in pos.neigh4() if p.x >= pos.x and p.y >= pos.y]
        return pos.neigh4()

    def heuristic(self, a, b):
        if self.moves == constants.MOVES_8:
            # diagonal steps cost 1 as well, Manhattan would overestimate
            return max(abs(a.x - b.x), abs(a.y - b.y))
        return a.manhattan_distance(b)

    def path_length(self, path):
        """Number of moves in a path of vertices, None for no path."""
        if path is None:
            return None
        return len(path) - 1


@dataclass(frozen=True)
class GridVertex:
    """A cell of a Grid; equal and hashed by position only."""
    pos: Cartesian
    grid: Grid = field(compare=False, repr=False)

    def neighbors(self):
        return [GridVertex(p, self.grid) for p in self.grid.steps_from(self.pos) if self.grid.is_open(p)]

    def distance(self, other):
        return self.grid.heuristic(self.pos, other.pos)

    def __str__(self):
        return str(self.pos)


class GridReader:
    """Handles parsing the grid problem file."""

    SECTIONS = ("GRID", "ORIGIN", "DESTINATION", "MOVES")

    def __init__(self, filename):
        self.filename = filename
        self.grid = Grid()

    def read_problem(self):
        """Reads the file and populates the Grid object.

        Raises:
            FileNotFoundError: when the problem file does not exist
        """
        with open(self.filename, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f if line.strip()]

        current_section = None
        rows = []

        for line in lines:
            # Section header, possibly carrying its value: "Origin: (0, 0)"
            head, sep, value = line.partition(':')
            if sep and head.strip().upper() in self.SECTIONS:
                current_section = head.strip().upper()
                line = value.strip()
                if not line:
                    continue

            if current_section == "GRID":
                rows.append(line)
            elif current_section in ("ORIGIN", "DESTINATION"):
                # Example: (4, 1)
                try:
                    pos = Cartesian.from_str(line)
                except CoordinateParseError as e:
                    logger.warning(f"Error parsing {current_section.lower()} line '{line}': {e}")
                    continue
                if current_section == "ORIGIN":
                    self.grid.origin = pos
                else:
                    self.grid.destination = pos
            elif current_section == "MOVES":
                if line.lower() in constants.MOVE_RULES:
                    self.grid.moves = line.lower()
                else:
                    logger.warning(f"Unknown move rule '{line}', keeping '{self.grid.moves}'")
            else:
                logger.warning(f"Ignoring line outside of any section: '{line}'")

        self._build_cells(rows)
        return self.grid

    def _build_cells(self, rows):
        # The last row of the file is y = 0
        self.grid.height = len(rows)
        self.grid.width = max((len(r) for r in rows), default=0)
        for row_idx, row in enumerate(rows):
            y = self.grid.height - 1 - row_idx
            for x, ch in enumerate(row):
                if ch == constants.WALL_CHAR:
                    self.grid.walls.add(Cartesian(x, y))
                elif ch != constants.OPEN_CHAR:
                    logger.warning(f"Unknown cell '{ch}' at ({x}, {y}), treating it as open")
            # Short rows are closed off up to the full width
            if len(row) < self.grid.width:
                logger.warning(f"Row at y = {y} has {len(row)} of {self.grid.width} cells, "
                               f"treating the missing cells as walls")
                for x in range(len(row), self.grid.width):
                    self.grid.walls.add(Cartesian(x, y))


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
