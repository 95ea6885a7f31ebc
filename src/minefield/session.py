"""
Interactive session driver.

Reads board dimensions and coordinates from a line source and plays one
game on a Board until it is won or lost. All I/O goes through the
``read_line`` and ``write`` callables so the loop can be scripted.
"""
import logging
import random
from typing import Callable, Optional, Tuple

from .board import Board, BoardConfig, GameState, RevealResult
from .render import render_board


logger = logging.getLogger(__name__)

ReadLine = Callable[[], str]
Write = Callable[[str], None]


# ============================================================================
# Messages
# ============================================================================

INVALID_INPUT = "Invalid input. Please enter two space-separated numbers."
COORDINATES_PROMPT = "Enter coordinates (x y): "
DIMENSIONS_PROMPT = "Enter width and height of the field (e.g., '10 5'): "
INVALID_DIMENSIONS = (
    "Invalid dimensions. Both width and height must be non-zero positive integers."
)
OUT_OF_BOUNDS = "Invalid coordinates. Please enter coordinates within the field."
WON_MESSAGE = "Congratulations! You've revealed all non-mine cells."
LOST_MESSAGE = "Boom! You clicked on a mine. Game over."


# ============================================================================
# Input Parsing
# ============================================================================

def parse_two_integers(line: str) -> Optional[Tuple[int, int]]:
    """
    Extract exactly two non-negative integers from a line.

    Tokens that are not plain decimal numbers, optionally with a single
    leading '+', are ignored.

    Returns:
        The pair, or None if the line does not hold exactly two numbers.
    """
    numbers = []
    for token in line.split():
        digits = token[1:] if token.startswith("+") else token
        if digits.isascii() and digits.isdigit():
            numbers.append(int(digits))
    if len(numbers) != 2:
        return None
    return numbers[0], numbers[1]


def read_two_integers(read_line: ReadLine, write: Write) -> Tuple[int, int]:
    """Read lines until one holds exactly two non-negative integers."""
    while True:
        pair = parse_two_integers(read_line())
        if pair is not None:
            return pair
        write(INVALID_INPUT)


def read_coordinates(read_line: ReadLine, write: Write) -> Tuple[int, int]:
    write(COORDINATES_PROMPT)
    return read_two_integers(read_line, write)


def read_dimensions(read_line: ReadLine, write: Write) -> BoardConfig:
    """Prompt for width and height until both are non-zero."""
    while True:
        write(DIMENSIONS_PROMPT)
        width, height = read_two_integers(read_line, write)
        try:
            return BoardConfig(width, height)
        except ValueError:
            write(INVALID_DIMENSIONS)


# ============================================================================
# Game Loop
# ============================================================================

def play(board: Board, read_line: ReadLine = input, write: Write = print) -> GameState:
    """
    Play one game on ``board`` until it is won or lost.

    Returns:
        GameState.WON or GameState.LOST.
    """
    while True:
        write(render_board(board))
        x, y = read_coordinates(read_line, write)
        result = board.reveal(x, y)

        if result == RevealResult.OUT_OF_BOUNDS:
            write(OUT_OF_BOUNDS)
        elif result == RevealResult.MINE_EXPLODED:
            write(render_board(board))
            write(LOST_MESSAGE)
            logger.debug("Game lost at (%d, %d)", x, y)
            return GameState.LOST
        elif board.all_non_mine_revealed():
            write(render_board(board))
            write(WON_MESSAGE)
            logger.debug("Game won at (%d, %d)", x, y)
            return GameState.WON


def run(
    read_line: ReadLine = input,
    write: Write = print,
    rng: Optional[random.Random] = None,
    config: Optional[BoardConfig] = None,
) -> GameState:
    """
    Run a full session: choose dimensions, build a board and play it.

    Args:
        read_line: Source of input lines.
        write: Sink for output text.
        rng: Random source for mine placement.
        config: Dimensions to use instead of prompting.
    """
    if config is None:
        config = read_dimensions(read_line, write)

    board = Board.new(config.width, config.height, rng=rng)
    logger.info(
        "Starting %dx%d game with %d mines",
        board.width, board.height, board.mine_count,
    )
    return play(board, read_line, write)
