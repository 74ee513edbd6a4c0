"""
Minesweeper board model.

Provides the board (mine placement, reveal, flag, chord), the layout
that maps world points to cells, and the session that ties pointer
input to board transitions.
"""
from .errors import MinefieldError, InvalidConfiguration, OutOfBounds
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealOutcome,
    RevealResult,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CLASSIC,
    PRESETS,
)
from .layout import BoardLayout
from .session import Action, ButtonState, GameSession, MouseButton, PointerEvent
from .text_view import render_observation
from .environment import MinesweeperEnv

__all__ = [
    "MinefieldError",
    "InvalidConfiguration",
    "OutOfBounds",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealOutcome",
    "RevealResult",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CLASSIC",
    "PRESETS",
    "BoardLayout",
    "Action",
    "ButtonState",
    "GameSession",
    "MouseButton",
    "PointerEvent",
    "render_observation",
    "MinesweeperEnv",
]
