"""
Marks and outcomes for TicTacToe.

A cell holds a CellMark. A finished (or evaluated) board has an Outcome.
The two are kept apart; outcome_for_mark() is the only bridge between them.
"""

from enum import Enum, IntEnum


class Outcome(IntEnum):
    """
    Result of a board, ordered so min()/max() pick the best outcome
    for each side.

    X (first player) maximizes, O (second player) minimizes.
    """
    SECOND_PLAYER_WINS = -1
    DRAW = 0
    FIRST_PLAYER_WINS = 1

    @classmethod
    def lowest(cls) -> "Outcome":
        return cls.SECOND_PLAYER_WINS

    @classmethod
    def highest(cls) -> "Outcome":
        return cls.FIRST_PLAYER_WINS


class CellMark(Enum):
    """What a cell on the board holds."""
    X = "X"
    O = "O"
    EMPTY = "."

    def opposite(self) -> "CellMark":
        """Get the opposite mark. EMPTY has no opposite."""
        if self == CellMark.X:
            return CellMark.O
        if self == CellMark.O:
            return CellMark.X
        raise ValueError("EMPTY has no opposite mark")

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def score(self) -> Outcome:
        """Scoring order of the mark: O < EMPTY < X."""
        return outcome_for_mark(self)

    @property
    def is_maximizing(self) -> bool:
        return self == CellMark.X

    @classmethod
    def from_char(cls, char: str) -> "CellMark":
        """
        Parse a single board character.

        Args:
            char: 'X', 'O' (any case), or '.', '-', ' ' for empty.

        Returns:
            The matching CellMark.
        """
        char = char.upper()
        if char == "X":
            return cls.X
        if char == "O":
            return cls.O
        if char in (".", "-", " "):
            return cls.EMPTY
        raise ValueError(f"Unknown board character: {char!r}")


_MARK_OUTCOMES = {
    CellMark.X: Outcome.FIRST_PLAYER_WINS,
    CellMark.O: Outcome.SECOND_PLAYER_WINS,
    CellMark.EMPTY: Outcome.DRAW,
}


def outcome_for_mark(mark: CellMark) -> Outcome:
    """Map the owner of a winning line to the board's outcome."""
    return _MARK_OUTCOMES[mark]
