"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging, chording and game state management.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field, replace
from enum import Enum, auto
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """What a reveal or chord did to the board."""

    REVEALED = auto()
    ALREADY_REVEALED = auto()
    FLAGGED = auto()
    NO_CHANGE = auto()
    GAME_OVER = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.rows * self.columns - 1
        if self.mine_count > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
CLASSIC = BoardConfig(20, 20, 10)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "classic": CLASSIC,
}


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal or chord.

    Attributes:
        result: Whether anything happened, and if not, why.
        cells: Every (row, column) revealed by the call, in reveal order.
        game_state: Game state after the call.
    """

    result: RevealResult
    cells: Tuple[Position, ...] = ()
    game_state: GameState = GameState.PLAYING

    @property
    def changed(self) -> bool:
        return self.result == RevealResult.REVEALED

    @property
    def hit_mine(self) -> bool:
        return self.changed and self.game_state == GameState.LOST

    @property
    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns a row-major grid of cells. Mines and adjacency counts are fixed
    at construction; afterwards only cell states change. Out-of-range
    indices raise ``OutOfBounds``; no-op actions are reported through
    ``RevealResult`` or a ``False`` return, never as exceptions.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[random.Random] = field(default=None, repr=False)
    mine_layout: InitVar[Optional[Iterable[Position]]] = None
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)
    _safe_revealed: int = field(default=0, init=False)

    def __post_init__(
        self, mine_layout: Optional[Iterable[Position]]
    ) -> None:
        """Build the grid, place mines and count neighbors."""
        self._init_grid()
        if mine_layout is None:
            self._place_random_mines(self.rng or random.Random())
        else:
            self._place_mines(mine_layout)
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, rows: int, columns: int, mines: Sequence[Position]
    ) -> "Board":
        """Build a board with mines at exactly the given positions."""
        return cls(BoardConfig(rows, columns, len(mines)), mine_layout=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create the row-major list of hidden cells."""
        self._cells = [
            Cell(row=row, column=col)
            for row in range(self.config.rows)
            for col in range(self.config.columns)
        ]

    def _place_random_mines(self, rng: random.Random) -> None:
        """Sample distinct cell indices without replacement."""
        indices = rng.sample(range(self.config.total_cells), self.config.mine_count)
        for index in indices:
            self._cells[index].is_mine = True
            logger.debug("Mine position: %d", index)

    def _place_mines(self, positions: Iterable[Position]) -> None:
        """Place mines at explicit (row, column) positions."""
        placed = 0
        for row, col in positions:
            if not self.in_bounds(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
            cell = self._cells[self._index(row, col)]
            if cell.is_mine:
                raise InvalidConfiguration(
                    f"Duplicate mine position ({row}, {col})"
                )
            cell.is_mine = True
            placed += 1
        if placed != self.config.mine_count:
            raise InvalidConfiguration(
                f"Expected {self.config.mine_count} mine positions, got {placed}"
            )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for cell in self._cells:
            if not cell.is_mine:
                cell.adjacent_mines = sum(
                    1
                    for row, col in self._get_neighbors(cell.row, cell.column)
                    if self._cells[self._index(row, col)].is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _index(self, row: int, col: int) -> int:
        return row * self.config.columns + col

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _checked_cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.config.rows, self.config.columns)
        return self._cells[self._index(row, col)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A zero-count cell floods outward through its hidden, unflagged
        neighbors. Revealing a mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome listing every cell revealed by this call.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        cell = self._checked_cell(row, col)
        if not self.is_playing:
            return self._outcome(RevealResult.GAME_OVER)
        if cell.is_revealed:
            return self._outcome(RevealResult.ALREADY_REVEALED)
        if cell.is_flagged:
            return self._outcome(RevealResult.FLAGGED)
        return self._outcome(RevealResult.REVEALED, self._flood([(row, col)]))

    def chord(self, row: int, col: int) -> RevealOutcome:
        """
        Chord action: reveal all unflagged neighbors if flag count matches.

        Args:
            row: Row index of a revealed numbered cell.
            col: Column index of a revealed numbered cell.

        Returns:
            Outcome listing every cell revealed by this call.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        self._checked_cell(row, col)
        if not self.is_playing:
            return self._outcome(RevealResult.GAME_OVER)
        if not self._can_chord(row, col):
            return self._outcome(RevealResult.NO_CHANGE)
        targets = [
            (neighbor_row, neighbor_col)
            for neighbor_row, neighbor_col in self._get_neighbors(row, col)
            if self._cells[self._index(neighbor_row, neighbor_col)].is_hidden
        ]
        revealed = self._flood(targets)
        if not revealed:
            return self._outcome(RevealResult.NO_CHANGE)
        return self._outcome(RevealResult.REVEALED, revealed)

    def _can_chord(self, row: int, col: int) -> bool:
        """Check if chord action is valid."""
        cell = self._cells[self._index(row, col)]
        if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
            return False
        return self._count_adjacent_flags(row, col) == cell.adjacent_mines

    def _count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._cells[self._index(neighbor_row, neighbor_col)].is_flagged:
                count += 1
        return count

    def _flood(self, starts: Iterable[Position]) -> List[Position]:
        """
        Reveal the start cells, then breadth-first through zero cells.

        Mines and numbered cells are revealed but never expanded, so the
        traversal stops at the border of each empty region.
        """
        revealed: List[Position] = []
        queue: Deque[Position] = deque()
        for row, col in starts:
            if self._reveal_cell(row, col):
                revealed.append((row, col))
                queue.append((row, col))

        while queue:
            row, col = queue.popleft()
            cell = self._cells[self._index(row, col)]
            if cell.is_mine or cell.adjacent_mines > 0:
                continue
            for neighbor in self._get_neighbors(row, col):
                if self._reveal_cell(*neighbor):
                    revealed.append(neighbor)
                    queue.append(neighbor)

        self._check_win_condition()
        return revealed

    def _reveal_cell(self, row: int, col: int) -> bool:
        """Reveal a single hidden cell and record its consequences."""
        cell = self._cells[self._index(row, col)]
        if not cell.reveal():
            return False
        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.info("Mine revealed at (%d, %d)", row, col)
        else:
            self._safe_revealed += 1
        return True

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._game_state != GameState.PLAYING:
            return
        if self._safe_revealed >= self.config.safe_cells:
            self._game_state = GameState.WON

    def _outcome(
        self, result: RevealResult, cells: Iterable[Position] = ()
    ) -> RevealOutcome:
        return RevealOutcome(result, tuple(cells), self._game_state)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is revealed or
            the game is over.

        Raises:
            OutOfBounds: If the position is not on the board.
        """
        cell = self._checked_cell(row, col)
        if not self.is_playing:
            return False
        return cell.toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if every safe cell has been revealed."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if a mine has been revealed."""
        return self._game_state == GameState.LOST

    def get_cell(self, row: int, col: int) -> Cell:
        """Get a snapshot of the cell at position.

        The returned cell is a copy; changing it does not touch the board.
        """
        return replace(self._checked_cell(row, col))

    def cell_state(self, row: int, col: int) -> CellState:
        """Get the visual state of the cell at position."""
        return self._checked_cell(row, col).state

    def adjacent_mine_count(self, row: int, col: int) -> int:
        """Get the number of mines around the cell at position."""
        return self._checked_cell(row, col).adjacent_mines

    def cells(self) -> Iterator[Cell]:
        """Iterate over snapshots of all cells in row-major order."""
        return (replace(cell) for cell in self._cells)

    @property
    def mine_positions(self) -> List[Position]:
        """Positions of every mine, row-major."""
        return [cell.position for cell in self._cells if cell.is_mine]

    @property
    def flags_placed(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self.config.mine_count - self.flags_placed

    @property
    def safe_cells_remaining(self) -> int:
        return self.config.safe_cells - self._safe_revealed

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.rows, self.config.columns)

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (row, col) positions that are still hidden.
        """
        return [cell.position for cell in self._cells if cell.is_hidden]
