"""
Game state management for TicTacToe.
Tracks the board, who plays which mark, and the move history.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .move_validator import BOARD_CELLS, MoveValidator, ValidationResult
from .player import CellMark, Outcome
from .win_checker import Line, WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


class Board:
    """
    The 3x3 board as 9 cells, index = row * 3 + col.

    Only place() mutates a board, and only into an empty cell.
    Everything else is a read-only query.
    """

    SIZE = 3

    def __init__(self, cells: Optional[List[CellMark]] = None):
        if cells is None:
            cells = [CellMark.EMPTY] * BOARD_CELLS
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(cells)}")
        self._cells = list(cells)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from 9 characters, e.g. "XX.OO....".

        Newlines and '|' separators are ignored, so a rendered grid
        like "XX.\\nOO.\\n...\\n" works too.
        """
        chars = [c for c in text if c not in "\n|"]
        return cls([CellMark.from_char(c) for c in chars])

    @property
    def cells(self) -> Tuple[CellMark, ...]:
        return tuple(self._cells)

    def __getitem__(self, index: int) -> CellMark:
        return self._cells[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({''.join(c.glyph for c in self._cells)!r})"

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(self._cells)

    def place(self, index: int, mark: CellMark) -> ValidationResult:
        """
        Place a mark on the board.

        Args:
            index: Board index (0-8).
            mark: CellMark.X or CellMark.O.

        Returns:
            ValidationResult. On failure the board is unchanged.
        """
        result = _validator.validate_cells(self._cells, index, mark)
        if result.is_valid:
            self._cells[index] = mark
        return result

    def legal_moves(self) -> Iterator[int]:
        """Empty indices in ascending order, as of this call."""
        empty = [i for i, cell in enumerate(self._cells) if cell == CellMark.EMPTY]
        return iter(empty)

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell != CellMark.EMPTY)

    def is_full(self) -> bool:
        return CellMark.EMPTY not in self._cells

    def evaluate(self) -> Outcome:
        """Outcome decided by the first complete line (rows, columns, diagonals)."""
        return _win_checker.evaluate(self._cells)

    def winner(self) -> Optional[CellMark]:
        return _win_checker.check_winner(self._cells)

    def winning_line(self) -> Optional[Line]:
        return _win_checker.get_winning_line(self._cells)

    def is_terminal(self) -> bool:
        """True if someone has won or the board is full."""
        return self.evaluate() != Outcome.DRAW or self.is_full()

    def render(self) -> str:
        """
        Text grid, one row per line.
        Empty cells show their 1-based position so the player knows what to type.
        """
        rows = []
        for row in range(self.SIZE):
            chars = []
            for col in range(self.SIZE):
                index = row * self.SIZE + col
                cell = self._cells[index]
                chars.append(str(index + 1) if cell == CellMark.EMPTY else cell.glyph)
            rows.append("".join(chars) + "\n")
        return "".join(rows)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: CellMark          # Who made the move
    index: int              # Board index (0-8)
    move_number: int        # Which move of the game this is (0-8)

    @property
    def position(self) -> int:
        """1-based position as the player types it."""
        return self.index + 1


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Which mark the human and the engine play
    - Move history
    - Game status (ongoing, won, draw)

    A new GameState is created for every game.
    """

    board: Board = field(default_factory=Board)

    human_mark: CellMark = CellMark.O
    engine_mark: CellMark = CellMark.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[CellMark] = None
    is_draw: bool = False
    is_game_over: bool = False

    @classmethod
    def new(cls, human_mark: CellMark = CellMark.O) -> "GameState":
        """Start a fresh game with the engine on the other mark."""
        return cls(human_mark=human_mark, engine_mark=human_mark.opposite())

    def make_move(self, index: int, mark: CellMark) -> ValidationResult:
        """
        Place a mark, record it and update the game status.

        Args:
            index: Board index (0-8).
            mark: The mark being played.

        Returns:
            ValidationResult from the board.
        """
        result = self.board.place(index, mark)
        if result.is_valid:
            self.record_move(index, mark)
        return result

    def record_move(self, index: int, mark: CellMark) -> Move:
        """Record a move already placed on the board (e.g. by the AI)."""
        move = Move(mark=mark, index=index, move_number=len(self.moves))
        self.moves.append(move)
        self.update_status()
        return move

    def update_status(self) -> "GameState":
        """Refresh winner / draw / game-over flags from the board."""
        self.winner = self.board.winner()
        self.is_game_over = self.board.is_terminal()
        self.is_draw = self.is_game_over and self.winner is None
        return self

    @property
    def outcome(self) -> Outcome:
        return self.board.evaluate()

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None
