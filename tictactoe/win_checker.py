"""
Win checker for TicTacToe.
Finds the line (if any) that decides a board.
"""

from typing import Optional, Sequence, Tuple

from .player import CellMark, Outcome, outcome_for_mark


Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally).
    """

    # All possible winning lines as board indices (row * 3 + col).
    # Scan order matters: rows, then columns, then diagonals.
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, cells: Sequence[CellMark]) -> Optional[CellMark]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 cells of a board.

        Returns:
            The winning mark, or None if no line is complete.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def get_winning_line(self, cells: Sequence[CellMark]) -> Optional[Line]:
        """
        Get the first complete line in scan order.

        Args:
            cells: The 9 cells of a board.

        Returns:
            The winning line as a tuple of 3 indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(cells, line) is not None:
                return line
        return None

    def evaluate(self, cells: Sequence[CellMark]) -> Outcome:
        """Score the cells: the first winning line decides, DRAW otherwise."""
        winner = self.check_winner(cells)
        if winner is None:
            return Outcome.DRAW
        return outcome_for_mark(winner)

    def count_winning_lines(self, cells: Sequence[CellMark], mark: CellMark) -> int:
        """Number of lines completely held by mark."""
        return sum(
            1 for line in self.WINNING_LINES
            if self._check_line(cells, line) == mark
        )

    def _check_line(
        self,
        cells: Sequence[CellMark],
        line: Line
    ) -> Optional[CellMark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        first = cells[a]
        if first == CellMark.EMPTY:
            return None  # Empty cell, no winner on this line

        if first == cells[b] == cells[c]:
            return first

        return None
