"""
Text rendering for minefield boards.
"""
from .board import Board


BORDER_CHAR = "#"


def render_board(board: Board, border: str = BORDER_CHAR) -> str:
    """
    Render the board framed by a border.

    Args:
        board: Board to draw.
        border: Single character used for the frame.

    Returns:
        ``height + 2`` lines joined by newlines, each ``width + 2`` wide.
    """
    edge = border * (board.width + 2)
    lines = [edge]
    for y in range(board.height):
        row = "".join(board.display_char(x, y) for x in range(board.width))
        lines.append(f"{border}{row}{border}")
    lines.append(edge)
    return "\n".join(lines)
