"""
Board module for the minefield engine.

Implements the game board with random mine placement, flood-fill
revealing, display characters and win/lose detection.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Mines per hundred cells
MINE_PERCENT = 15

# Visit order: up-left, up, up-right, left, right, down-left, down, down-right
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """Outcome of a single reveal."""

    OK = auto()
    OUT_OF_BOUNDS = auto()
    MINE_EXPLODED = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for value in (self.width, self.height):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("Board dimensions must be positive")
            if value < 1:
                raise ValueError("Board dimensions must be positive")

    @property
    def num_mines(self) -> int:
        """Mines placed on a random board of this size."""
        return self.width * self.height * MINE_PERCENT // 100


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minefield game board.

    Holds two same-shaped boolean grids indexed ``[y, x]``: the mine
    layout, which never changes, and the visibility mask, which only
    ever turns cells on.
    """

    def __init__(self, mines: np.ndarray, revealed: np.ndarray) -> None:
        if mines.ndim != 2 or mines.shape != revealed.shape:
            raise ValueError("Mine and visibility grids must have the same shape")
        if mines.shape[0] == 0 or mines.shape[1] == 0:
            raise ValueError("Grids must have at least one row and one column")

        self._mines = mines.astype(bool, copy=True)
        self._mines.setflags(write=False)
        self._revealed = revealed.astype(bool, copy=True)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a hidden board with randomly placed mines.

        Args:
            width: Number of columns (positive).
            height: Number of rows (positive).
            rng: Random source; a fresh ``random.Random`` is used if omitted.

        Returns:
            A new board with ``floor(width * height * 0.15)`` mines.
        """
        config = BoardConfig(width, height)
        mines = _place_mines(config, rng or random.Random())
        revealed = np.zeros_like(mines)
        logger.debug(
            "Created %dx%d board with %d mines",
            config.width, config.height, config.num_mines,
        )
        return cls(mines, revealed)

    @classmethod
    def from_grids(
        cls,
        mines: Sequence[Sequence[bool]],
        revealed: Sequence[Sequence[bool]],
    ) -> "Board":
        """
        Create a board from pre-built grids.

        Raises:
            ValueError: If either grid is empty, has an empty or ragged
                row, or the two grids differ in shape.
        """
        if len(mines) == 0 or len(mines) != len(revealed):
            raise ValueError("Grids must have the same, non-zero number of rows")

        width = len(mines[0])
        for mine_row, revealed_row in zip(mines, revealed):
            if len(mine_row) == 0 or len(mine_row) != len(revealed_row):
                raise ValueError("Grid rows must be non-empty and of equal length")
            if len(mine_row) != width:
                raise ValueError("Grid rows must be non-empty and of equal length")

        return cls(np.array(mines, dtype=bool), np.array(revealed, dtype=bool))

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._mines.shape[1]

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._mines.shape[0]

    @property
    def mine_count(self) -> int:
        """Total number of mines on the board."""
        return int(self._mines.sum())

    def is_inside(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _require_inside(self, x: int, y: int) -> None:
        """Raise IndexError for positions off the board."""
        if not self.is_inside(x, y):
            raise IndexError(
                f"Position ({x}, {y}) is outside the "
                f"{self.width}x{self.height} board"
            )

    def _get_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """In-bounds neighbors of a cell, in visit order."""
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.is_inside(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    # ========================================================================
    # Cell Queries
    # ========================================================================

    def is_mine(self, x: int, y: int) -> bool:
        """Check if a cell holds a mine."""
        self._require_inside(x, y)
        return bool(self._mines[y, x])

    def is_revealed(self, x: int, y: int) -> bool:
        """Check if a cell is visible to the player."""
        self._require_inside(x, y)
        return bool(self._revealed[y, x])

    def adjacent_mine_count(self, x: int, y: int) -> int:
        """
        Count mines among the in-bounds neighbors of a cell (0-8).

        Raises:
            IndexError: If the cell is off the board.
        """
        self._require_inside(x, y)
        count = 0
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            if self._mines[neighbor_y, neighbor_x]:
                count += 1
        return count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get a snapshot of the cell at position, or None if invalid."""
        if not self.is_inside(x, y):
            return None
        return Cell(
            is_mine=self.is_mine(x, y),
            is_revealed=self.is_revealed(x, y),
            adjacent_mines=self.adjacent_mine_count(x, y),
        )

    def display_char(self, x: int, y: int) -> Optional[str]:
        """
        Character shown for a cell, or None if out of bounds.

        Returns:
            '-' for hidden, '*' for a revealed mine, ' ' for a revealed
            cell without adjacent mines, otherwise the count as a digit.
        """
        cell = self.get_cell(x, y)
        if cell is None:
            return None
        return cell.to_char()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal a cell and flood-fill its empty neighborhood.

        The clicked cell is revealed even when it holds a mine, so the
        final board shows what exploded.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            OUT_OF_BOUNDS without touching the board, MINE_EXPLODED if
            the cell is a mine, otherwise OK.
        """
        if not self.is_inside(x, y):
            logger.debug("Reveal at (%d, %d) is out of bounds", x, y)
            return RevealResult.OUT_OF_BOUNDS

        self._spread(x, y)

        if self._mines[y, x]:
            logger.debug("Mine exploded at (%d, %d)", x, y)
            return RevealResult.MINE_EXPLODED
        return RevealResult.OK

    def _spread(self, x: int, y: int) -> None:
        """Reveal from (x, y) outward, stopping at mines and numbered cells."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            if not self.is_inside(cx, cy) or self._revealed[cy, cx]:
                continue
            self._revealed[cy, cx] = True

            if self._mines[cy, cx] or self.adjacent_mine_count(cx, cy) != 0:
                continue

            # Reversed so neighbors pop in visit order
            stack.extend(reversed(self._get_neighbors(cx, cy)))

    # ========================================================================
    # State Accessors
    # ========================================================================

    def all_non_mine_revealed(self) -> bool:
        """Check if every cell is either a mine or revealed."""
        return bool(np.all(self._mines | self._revealed))

    @property
    def game_state(self) -> GameState:
        """Game state derived from the grids."""
        if np.any(self._mines & self._revealed):
            return GameState.LOST
        if self.all_non_mine_revealed():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST

    def __repr__(self) -> str:
        return (
            f"Board(width={self.width}, height={self.height}, "
            f"mines={self.mine_count}, state={self.game_state.name})"
        )


# ============================================================================
# Mine Placement
# ============================================================================

def _place_mines(config: BoardConfig, rng: random.Random) -> np.ndarray:
    """
    Mark ``config.num_mines`` distinct random cells as mines.

    Samples coordinates uniformly and rejects cells already chosen.
    """
    mines = np.zeros((config.height, config.width), dtype=bool)
    for _ in range(config.num_mines):
        while True:
            y = rng.randrange(config.height)
            x = rng.randrange(config.width)
            if not mines[y, x]:
                mines[y, x] = True
                break
    return mines
