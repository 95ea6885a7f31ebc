"""
Cell module for the minefield engine.

A cell is never stored on the board; the board builds these snapshots
on demand from its mine and visibility grids.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

HIDDEN_CHAR = "-"
MINE_CHAR = "*"
EMPTY_CHAR = " "


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    MINE = auto()
    EMPTY = auto()
    NUMBERED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Snapshot of a single cell in the grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the player can see this cell.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    adjacent_mines: int = 0

    @property
    def state(self) -> CellState:
        """Visual state of this cell."""
        if not self.is_revealed:
            return CellState.HIDDEN
        if self.is_mine:
            return CellState.MINE
        if self.adjacent_mines == 0:
            return CellState.EMPTY
        return CellState.NUMBERED

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.is_revealed

    def to_char(self) -> str:
        """
        Convert cell to its display character.

        Returns:
            '-': Hidden cell
            '*': Revealed mine
            ' ': Revealed cell with no adjacent mines
            '1'-'8': Revealed cell with adjacent mine count
        """
        state = self.state
        if state == CellState.HIDDEN:
            return HIDDEN_CHAR
        if state == CellState.MINE:
            return MINE_CHAR
        if state == CellState.EMPTY:
            return EMPTY_CHAR
        return str(self.adjacent_mines)
