"""
Board layout: maps between grid cells and world-space points.

The placement formula (``cell_origin``) and the hit test (``locate``)
live side by side so a presentation layer drawing cells with one and
resolving clicks with the other always agrees with itself.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidConfiguration


Point = Tuple[float, float]


def _check_dimensions(rows: int, columns: int) -> None:
    if rows < 1 or columns < 1:
        raise InvalidConfiguration("Layout dimensions must be positive")


# ============================================================================
# Board Layout
# ============================================================================

@dataclass(frozen=True)
class BoardLayout:
    """
    World-space geometry of a board.

    Cell (row, column) covers the square whose lower corner is
    ``(origin_x + column * pitch, origin_y + row * pitch)`` and whose
    side is ``cell_size``. The remaining ``gap`` of each period
    separates it from the next cell.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        cell_size: Side length of a cell.
        gap: Space between neighboring cells.
        origin_x: World x of the corner of cell (0, 0).
        origin_y: World y of the corner of cell (0, 0).
    """

    rows: int
    columns: int
    cell_size: float = 18.0
    gap: float = 2.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        _check_dimensions(self.rows, self.columns)
        if self.cell_size <= 0:
            raise InvalidConfiguration("Cell size must be positive")
        if self.gap < 0:
            raise InvalidConfiguration("Gap cannot be negative")

    @classmethod
    def from_window(
        cls,
        rows: int,
        columns: int,
        window_width: float,
        window_height: float,
        gap: float = 2.0,
    ) -> "BoardLayout":
        """
        Size cells so the grid fills a window along its tighter axis.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            window_width: Window width in world units.
            window_height: Window height in world units.
            gap: Space between neighboring cells.

        Returns:
            Layout anchored at the world origin.
        """
        _check_dimensions(rows, columns)
        by_width = (window_width - gap * columns) / columns
        by_height = (window_height - gap * rows) / rows
        return cls(rows, columns, cell_size=min(by_width, by_height), gap=gap)

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def pitch(self) -> float:
        """Distance between the corners of two neighboring cells."""
        return self.cell_size + self.gap

    @property
    def width(self) -> float:
        return self.columns * self.pitch - self.gap

    @property
    def height(self) -> float:
        return self.rows * self.pitch - self.gap

    @property
    def center(self) -> Point:
        """World point at the middle of the grid, where a camera is aimed."""
        return (
            self.origin_x + self.width / 2,
            self.origin_y + self.height / 2,
        )

    def cell_origin(self, row: int, column: int) -> Point:
        """World position of a cell's lower corner."""
        return (
            self.origin_x + column * self.pitch,
            self.origin_y + row * self.pitch,
        )

    def cell_center(self, row: int, column: int) -> Point:
        """World position of a cell's center."""
        x, y = self.cell_origin(row, column)
        half = self.cell_size / 2
        return x + half, y + half

    # ========================================================================
    # Hit Testing
    # ========================================================================

    def locate(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Find the cell under a world point.

        Args:
            x: World x coordinate.
            y: World y coordinate.

        Returns:
            (row, column) of the cell, or None if the point falls in a
            gap or outside the grid.
        """
        column = self._axis_index(x - self.origin_x, self.columns)
        if column is None:
            return None
        row = self._axis_index(y - self.origin_y, self.rows)
        if row is None:
            return None
        return row, column

    def _axis_index(self, offset: float, count: int) -> Optional[int]:
        index = math.floor(offset / self.pitch)
        if not 0 <= index < count:
            return None
        if offset - index * self.pitch >= self.cell_size:
            return None
        return index

    def window_to_world(
        self,
        cursor_x: float,
        cursor_y: float,
        window_width: float,
        window_height: float,
    ) -> Point:
        """
        Un-project a window cursor through a camera centered on the grid.

        Window coordinates start at the top-left corner with y pointing
        down; world y points up.
        """
        center_x, center_y = self.center
        return (
            center_x + cursor_x - window_width / 2,
            center_y + window_height / 2 - cursor_y,
        )
