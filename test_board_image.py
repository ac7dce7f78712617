"""
Tests for board snapshot images.
"""

import cv2
import numpy as np

from tictactoe.board_image import draw_board, save_board_image
from tictactoe.config import GameConfig
from tictactoe.game_state import Board


def pixel(image, x, y):
    return tuple(int(v) for v in image[y, x])


def test_empty_board_image():
    image = draw_board(Board())

    assert image.shape == (GameConfig.IMAGE_SIZE, GameConfig.IMAGE_SIZE, 3)
    assert image.dtype == np.uint8
    # Grid line between column 0 and 1
    assert pixel(image, 133, 20) == GameConfig.GRID_COLOR
    # Position numbers are drawn on empty cells
    assert (image == np.array(GameConfig.LABEL_COLOR, dtype=np.uint8)).all(axis=2).any()


def test_marks_are_drawn_in_their_colours():
    image = draw_board(Board.from_string("....X...O"))

    # X strokes cross at the centre of cell 4
    assert pixel(image, 199, 199) == GameConfig.X_COLOR
    # O ring around the centre of cell 8 (radius = cell // 2 - cell // 5)
    assert pixel(image, 332 + 40, 332) == GameConfig.O_COLOR
    assert pixel(image, 332, 332) == GameConfig.BACKGROUND_COLOR


def test_winning_line_is_highlighted():
    image = draw_board(Board.from_string("XXXOO...."))
    assert pixel(image, 100, 66) == GameConfig.WIN_LINE_COLOR

    no_win = draw_board(Board.from_string("XX.OO...."))
    assert not (no_win == np.array(GameConfig.WIN_LINE_COLOR, dtype=np.uint8)).all(axis=2).any()


def test_custom_size():
    assert draw_board(Board(), size=150).shape == (150, 150, 3)


def test_save_board_image(tmp_path):
    path = tmp_path / "board.png"

    assert save_board_image(Board.from_string("X...O...."), str(path))

    loaded = cv2.imread(str(path))
    assert loaded is not None
    assert loaded.shape == (GameConfig.IMAGE_SIZE, GameConfig.IMAGE_SIZE, 3)
