"""
Move validator for TicTacToe.
Validates that moves follow the rules and turns console input into positions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from .player import CellMark

if TYPE_CHECKING:
    from .game_state import Board


BOARD_CELLS = 9


class PlaceError(Enum):
    """Why a placement was refused."""
    INVALID_POSITION = "invalid_position"
    ALREADY_OCCUPIED = "already_occupied"
    INVALID_MARK = "invalid_mark"
    NOT_A_NUMBER = "not_a_number"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[PlaceError] = None
    error_message: Optional[str] = None
    index: Optional[int] = None  # Board index (0-8) once known

    @classmethod
    def ok(cls, index: int) -> "ValidationResult":
        return cls(is_valid=True, index=index)

    @classmethod
    def failed(cls, error: PlaceError, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, error_message=message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be on the board (0-8)
    2. Can only place on empty cells
    3. Only X or O can be placed, a cell is never cleared

    Whether the game is already over is NOT checked here; callers check
    Board.is_terminal() themselves.
    """

    def validate_cells(
        self,
        cells: Sequence[CellMark],
        index: int,
        mark: CellMark
    ) -> ValidationResult:
        """
        Validate a placement against raw cells.

        Args:
            cells: The 9 cells of a board.
            index: Board index (0-8).
            mark: Mark to place.

        Returns:
            ValidationResult with is_valid and error.
        """
        # bool is an int subclass but never a position
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < BOARD_CELLS):
            return ValidationResult.failed(
                PlaceError.INVALID_POSITION,
                f"Invalid position {index!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        if mark not in (CellMark.X, CellMark.O):
            return ValidationResult.failed(
                PlaceError.INVALID_MARK,
                f"Cannot place {mark!r}, only X or O."
            )

        if cells[index] != CellMark.EMPTY:
            return ValidationResult.failed(
                PlaceError.ALREADY_OCCUPIED,
                f"Cell {index + 1} is already occupied by {cells[index].glyph}"
            )

        return ValidationResult.ok(index)

    def validate_move(self, board: "Board", index: int, mark: CellMark) -> ValidationResult:
        """Validate a placement on a board without touching it."""
        return self.validate_cells(board.cells, index, mark)

    def parse_position(self, text: str) -> ValidationResult:
        """
        Turn a 1-based console entry ("1".."9") into a board index.

        Args:
            text: Raw user input.

        Returns:
            ValidationResult with the 0-based index, or the parse error.
        """
        text = text.strip()
        try:
            position = int(text)
        except ValueError:
            return ValidationResult.failed(
                PlaceError.NOT_A_NUMBER,
                f"{text!r} is not a number. Type a number 1-{BOARD_CELLS}."
            )

        if not 1 <= position <= BOARD_CELLS:
            return ValidationResult.failed(
                PlaceError.INVALID_POSITION,
                f"Invalid position {position}. Must be 1-{BOARD_CELLS}."
            )

        return ValidationResult.ok(position - 1)
