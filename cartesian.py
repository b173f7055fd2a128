import re
from dataclasses import dataclass

INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1


class CoordinateParseError(ValueError):
    """Raised when text cannot be read as an `(x, y)` coordinate."""

    def __init__(self, text, reason):
        super().__init__(f"Cannot parse coordinate '{text}': {reason}")
        self.text = text
        self.reason = reason


@dataclass(frozen=True)
class Cartesian:
    """Represents an integer point in the plane, y growing upwards."""
    x: int
    y: int

    def neigh4(self):
        """Points around `self` excluding diagonals: west, north, east, south."""
        x, y = self.x, self.y
        return [
            Cartesian(x - 1, y),
            Cartesian(x, y + 1),
            Cartesian(x + 1, y),
            Cartesian(x, y - 1),
        ]

    def neigh8(self):
        """Points around `self` including diagonals, clockwise from west."""
        x, y = self.x, self.y
        return [
            Cartesian(x - 1, y),
            Cartesian(x - 1, y + 1),
            Cartesian(x, y + 1),
            Cartesian(x + 1, y + 1),
            Cartesian(x + 1, y),
            Cartesian(x + 1, y - 1),
            Cartesian(x, y - 1),
            Cartesian(x - 1, y - 1),
        ]

    def manhattan_distance(self, other):
        return abs(self.x - other.x) + abs(self.y - other.y)

    # An open, unbounded 4-connected plane
    def neighbors(self):
        return self.neigh4()

    def distance(self, other):
        return self.manhattan_distance(other)

    @classmethod
    def from_str(cls, text):
        """Parses "(x, y)"; parentheses and spaces around the numbers are optional.

        Args:
            text (str): coordinate text, e.g. "(3, -2)" or "3,-2"

        Returns:
            Cartesian: the parsed point

        Raises:
            CoordinateParseError: when the text is not two comma separated integers
        """
        parts = [p.strip() for p in text.strip().strip('()').split(',')]
        if len(parts) != 2:
            raise CoordinateParseError(text, f"expected 2 components, got {len(parts)}")
        values = []
        for part in parts:
            if not INTEGER_RE.fullmatch(part):
                raise CoordinateParseError(text, f"'{part}' is not an integer")
            value = int(part)
            if not INT32_MIN <= value <= INT32_MAX:
                raise CoordinateParseError(text, f"{value} is out of the 32-bit integer range")
            values.append(value)
        return cls(*values)

    def __add__(self, other):
        if not isinstance(other, Cartesian):
            return NotImplemented
        return Cartesian(self.x + other.x, self.y + other.y)

    def __str__(self):
        return f"({self.x}, {self.y})"
