"""
Board snapshot images.
Draws a board as a BGR image so a finished game can be saved to disk.
"""

from typing import Tuple

import cv2
import numpy as np

from .config import GameConfig
from .game_state import Board
from .player import CellMark


def _cell_center(index: int, cell_size: int) -> Tuple[int, int]:
    row, col = divmod(index, Board.SIZE)
    return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2


def draw_board(board: Board, size: int = GameConfig.IMAGE_SIZE) -> np.ndarray:
    """
    Create a visual TicTacToe grid with X and O markers.

    Args:
        board: Board to draw.
        size: Size of the output image (square).

    Returns:
        BGR image of the board.
    """
    grid_img = np.full((size, size, 3), GameConfig.BACKGROUND_COLOR, dtype=np.uint8)

    cell_size = size // Board.SIZE
    line_thickness = GameConfig.LINE_THICKNESS

    # Grid lines
    for i in range(1, Board.SIZE):
        x = i * cell_size
        cv2.line(grid_img, (x, 0), (x, size), GameConfig.GRID_COLOR, line_thickness)
        y = i * cell_size
        cv2.line(grid_img, (0, y), (size, y), GameConfig.GRID_COLOR, line_thickness)

    cv2.rectangle(grid_img, (0, 0), (size - 1, size - 1), GameConfig.GRID_COLOR, line_thickness)

    margin = cell_size // 5
    marker_size = cell_size // 2 - margin

    for index, cell in enumerate(board.cells):
        cx, cy = _cell_center(index, cell_size)

        if cell == CellMark.X:
            color = GameConfig.X_COLOR
            cv2.line(grid_img,
                     (cx - marker_size, cy - marker_size),
                     (cx + marker_size, cy + marker_size),
                     color, GameConfig.MARKER_THICKNESS)
            cv2.line(grid_img,
                     (cx + marker_size, cy - marker_size),
                     (cx - marker_size, cy + marker_size),
                     color, GameConfig.MARKER_THICKNESS)
        elif cell == CellMark.O:
            cv2.circle(grid_img, (cx, cy), marker_size,
                       GameConfig.O_COLOR, GameConfig.MARKER_THICKNESS)
        else:
            # Position number the player would type
            cv2.putText(grid_img, str(index + 1), (cx - 10, cy + 10),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, GameConfig.LABEL_COLOR, 2)

    line = board.winning_line()
    if line is not None:
        start = _cell_center(line[0], cell_size)
        end = _cell_center(line[-1], cell_size)
        cv2.line(grid_img, start, end, GameConfig.WIN_LINE_COLOR, line_thickness * 2)

    return grid_img


def save_board_image(board: Board, path: str, size: int = GameConfig.IMAGE_SIZE) -> bool:
    """
    Draw the board and write it to path (format from the extension).

    Returns:
        True if OpenCV wrote the file.
    """
    return bool(cv2.imwrite(path, draw_board(board, size)))
