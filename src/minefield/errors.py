"""
Exceptions raised by the Minesweeper board model.
"""


class MinefieldError(Exception):
    """Base class for all board model errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board or layout parameters cannot describe a playable game."""


class OutOfBounds(MinefieldError, IndexError):
    """A (row, column) index lies outside the grid."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Cell ({row}, {column}) is outside a {rows}x{columns} board"
        )
        self.row = row
        self.column = column
