"""
Location value type for grid cells and direction vectors.
"""

from typing import NamedTuple


class Location(NamedTuple):
    """
    A (row, col) pair. Also used as a direction vector, e.g. (1, 0) is one
    row down.
    """

    row: int
    col: int

    def shifted(self, direction: "Location") -> "Location":
        """Return the location one step away in the given direction."""
        return Location(self.row + direction.row, self.col + direction.col)
