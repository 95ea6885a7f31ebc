"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board


# ============================================================================
# Reference Field
# ============================================================================

# 3 columns x 14 rows. The middle column of rows 4-12 sees 1 to 8 mines.
REFERENCE_MINES = [
    [False, False, False],
    [False, False, False],
    [False, False, False],
    [False, False, False],
    [False, False, False],  # 1
    [True, False, False],   # 2
    [True, False, False],   # 3
    [True, False, False],   # 4
    [True, False, True],    # 5
    [True, False, True],    # 6
    [True, False, True],    # 7
    [True, True, True],
    [True, False, True],    # 8
    [True, True, True],
]


def _visibility(visible: bool) -> List[List[bool]]:
    return [[visible] * len(row) for row in REFERENCE_MINES]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def hidden_field() -> Board:
    """Reference field with every cell hidden."""
    return Board.from_grids(REFERENCE_MINES, _visibility(False))


@pytest.fixture
def visible_field() -> Board:
    """Reference field with every cell revealed."""
    return Board.from_grids(REFERENCE_MINES, _visibility(True))


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return Board.from_grids([[False] * 5] * 5, [[False] * 5] * 5)


@pytest.fixture
def seeded_board() -> Board:
    """Random 10x20 board with a fixed seed."""
    return Board.new(10, 20, rng=random.Random(1234))
