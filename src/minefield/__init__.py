"""
Minefield game module.

Provides the board engine, its text rendering and an interactive session.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, RevealResult, MINE_PERCENT
from .render import render_board
from .session import play, run

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "MINE_PERCENT",
    "render_board",
    "play",
    "run",
]
