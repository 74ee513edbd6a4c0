"""
Game session: turns pointer events into board transitions.

The session owns the board for the current game and the layout used to
hit-test clicks. Presentation code calls ``handle_pointer`` once per
input event and redraws the positions it returns.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from .board import Board, BoardConfig, GameState
from .errors import InvalidConfiguration, OutOfBounds
from .layout import BoardLayout

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Input Events
# ============================================================================

class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class ButtonState(Enum):
    PRESSED = auto()
    RELEASED = auto()


@dataclass(frozen=True)
class PointerEvent:
    """
    A mouse button transition at a world-space point.

    Attributes:
        button: Which button changed.
        state: Whether it was pressed or released.
        x: World x coordinate of the cursor.
        y: World y coordinate of the cursor.
    """

    button: MouseButton
    state: ButtonState
    x: float
    y: float


class Action(Enum):
    """Board transitions a player can request."""

    REVEAL = auto()
    FLAG = auto()
    CHORD = auto()


BUTTON_ACTIONS: Dict[MouseButton, Action] = {
    MouseButton.LEFT: Action.REVEAL,
    MouseButton.RIGHT: Action.FLAG,
    MouseButton.MIDDLE: Action.CHORD,
}


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Owns one board at a time and routes player input to it.

    Buttons act on release: left reveals, right toggles a flag and
    middle chords.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        layout: Optional[BoardLayout] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a session and its first game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            layout: World geometry; defaults to one sized to the config.
            rng: Random source for mine placement across games.

        Raises:
            InvalidConfiguration: If the layout does not match the board.
        """
        self.config = config or BoardConfig()
        self.layout = layout or BoardLayout(self.config.rows, self.config.columns)
        if (self.layout.rows, self.layout.columns) != (
            self.config.rows,
            self.config.columns,
        ):
            raise InvalidConfiguration(
                f"Layout is {self.layout.rows}x{self.layout.columns} but board "
                f"is {self.config.rows}x{self.config.columns}"
            )
        self._rng = rng or random.Random()
        self.games_played = 0
        self.board = self.new_game()

    def new_game(self) -> Board:
        """Discard the current board and deal a fresh one."""
        self.board = Board(self.config, rng=self._rng)
        self.games_played += 1
        logger.debug(
            "Game %d: %dx%d with %d mines",
            self.games_played,
            self.config.rows,
            self.config.columns,
            self.config.mine_count,
        )
        return self.board

    @property
    def game_state(self) -> GameState:
        return self.board.game_state

    # ========================================================================
    # Event Handling
    # ========================================================================

    def handle_pointer(self, event: PointerEvent) -> List[Position]:
        """
        Apply a pointer event to the board.

        Args:
            event: Button transition at a world point.

        Returns:
            Positions whose state changed. Empty for presses, misses
            and no-op actions.
        """
        if event.state != ButtonState.RELEASED:
            return []
        target = self.layout.locate(event.x, event.y)
        if target is None:
            logger.debug("Click at (%.1f, %.1f) missed the board", event.x, event.y)
            return []
        return self.dispatch(BUTTON_ACTIONS[event.button], *target)

    def dispatch(self, action: Action, row: int, column: int) -> List[Position]:
        """
        Run one action on the current board.

        Out-of-range positions are logged and ignored.

        Returns:
            Positions whose state changed.
        """
        logger.debug("%s at (%d, %d)", action.name, row, column)
        previous = self.board.game_state
        try:
            changed = self._apply(action, row, column)
        except OutOfBounds as exc:
            logger.warning("Ignoring %s: %s", action.name, exc)
            return []

        state = self.board.game_state
        if state != previous and state != GameState.PLAYING:
            logger.info("Game %d %s", self.games_played, state.name.lower())
        return changed

    def _apply(self, action: Action, row: int, column: int) -> List[Position]:
        if action == Action.FLAG:
            if self.board.toggle_flag(row, column):
                return [(row, column)]
            return []
        if action == Action.CHORD:
            outcome = self.board.chord(row, column)
        else:
            outcome = self.board.reveal(row, column)
        return list(outcome.cells)
