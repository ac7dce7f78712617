"""
AI player for TicTacToe.
Uses the Minimax algorithm (optionally with alpha-beta pruning) to choose the best move.
"""

from typing import Callable, NamedTuple, Optional

from .config import GameConfig
from .game_state import Board
from .player import CellMark, Outcome


NodeCallback = Optional[Callable[[], None]]


class SearchResult(NamedTuple):
    """Best move found and the outcome it guarantees."""
    index: Optional[int]    # None when the search stopped at the root
    score: Outcome


def _child(board: Board, index: int, mark: CellMark) -> Board:
    """The board after mark is played at index, leaving board untouched."""
    next_board = board.copy()
    next_board.place(index, mark)
    return next_board


def minimax(
    board: Board,
    depth: int,
    turn: CellMark,
    on_node: NodeCallback = None
) -> SearchResult:
    """
    Plain minimax.

    Args:
        board: Position to search. Never modified.
        depth: Plies left to explore; 0 evaluates the board as it is.
        turn: Mark to move. X maximizes, O minimizes.
        on_node: Called once per visited node.

    Returns:
        SearchResult. Among equally good moves the earliest index wins.
    """
    if on_node is not None:
        on_node()

    if depth == 0 or board.is_terminal():
        return SearchResult(None, board.evaluate())

    maximizing = turn.is_maximizing
    best = SearchResult(None, Outcome.lowest() if maximizing else Outcome.highest())

    for index in board.legal_moves():
        _, score = minimax(_child(board, index, turn), depth - 1, turn.opposite(), on_node)

        if best.index is None:
            better = True
        elif maximizing:
            better = score > best.score
        else:
            better = score < best.score

        if better:
            best = SearchResult(index, score)

    return best


def alphabeta(
    board: Board,
    depth: int,
    turn: CellMark,
    alpha: Outcome = Outcome.lowest(),
    beta: Outcome = Outcome.highest(),
    on_node: NodeCallback = None
) -> SearchResult:
    """
    Minimax with alpha-beta pruning.

    alpha is what the maximizing side (X) can already guarantee,
    beta what the minimizing side (O) can. The root value is always
    the same as minimax(); only the chosen index may differ on ties.
    """
    if on_node is not None:
        on_node()

    if depth == 0 or board.is_terminal():
        return SearchResult(None, board.evaluate())

    if turn.is_maximizing:
        best = SearchResult(None, Outcome.lowest())
        for index in board.legal_moves():
            _, score = alphabeta(
                _child(board, index, turn), depth - 1, turn.opposite(),
                alpha, beta, on_node
            )
            if best.index is None or score > best.score:
                best = SearchResult(index, score)
            alpha = max(alpha, best.score)
            if best.score > beta:
                break  # Prune
        return best

    best = SearchResult(None, Outcome.highest())
    for index in board.legal_moves():
        _, score = alphabeta(
            _child(board, index, turn), depth - 1, turn.opposite(),
            alpha, beta, on_node
        )
        if best.index is None or score < best.score:
            best = SearchResult(index, score)
        beta = min(beta, best.score)
        if best.score < alpha:
            break  # Prune
    return best


ALGORITHMS = {
    "minimax": minimax,
    "alphabeta": alphabeta,
}

_OUTCOME_NAMES = {
    Outcome.FIRST_PLAYER_WINS: "X wins",
    Outcome.SECOND_PLAYER_WINS: "O wins",
    Outcome.DRAW: "draw",
}


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        mark: CellMark = CellMark.X,
        algorithm: str = GameConfig.ALGORITHM,
        depth: int = GameConfig.SEARCH_DEPTH
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: X).
            algorithm: "minimax" or "alphabeta".
            depth: Search depth in plies (9 searches the whole game).
        """
        if mark not in (CellMark.X, CellMark.O):
            raise ValueError(f"AI must play X or O, not {mark!r}")
        if algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
            )
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")

        self.mark = mark
        self.algorithm = algorithm
        self.depth = depth

        # Nodes visited by the last search (for debugging)
        self.nodes_evaluated = 0

    def _count_node(self):
        self.nodes_evaluated += 1

    def search(self, board: Board) -> SearchResult:
        """Run the configured search with the AI to move."""
        self.nodes_evaluated = 0
        search_fn = ALGORITHMS[self.algorithm]
        return search_fn(board, self.depth, self.mark, on_node=self._count_node)

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Returns:
            Board index (0-8) of the best move, or None if the game is over.
        """
        if board.is_terminal():
            return None
        return self.search(board).index

    def make_move(self, board: Board) -> Optional[int]:
        """
        Search, then play the chosen move on the real board.

        Does nothing on a finished board.

        Returns:
            The index played, or None if no move was made.
        """
        if board.is_terminal():
            return None

        result = self.search(board)
        if result.index is None:
            # depth 0 gives no move; fall back to the first legal one
            result = SearchResult(next(board.legal_moves()), result.score)

        board.place(result.index, self.mark)
        return result.index

    def get_move_suggestion(self, board: Board, mark: Optional[CellMark] = None) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.
            mark: Mark to suggest a move for (default: the AI's own).

        Returns:
            A string describing the suggested move.
        """
        if board.is_terminal():
            return "No moves available!"

        advisor = self if mark in (None, self.mark) else AIPlayer(mark, self.algorithm, self.depth)
        result = advisor.search(board)
        if result.index is None:
            return "No suggestion at this search depth."

        return f"Play at {result.index + 1} (expected result: {_OUTCOME_NAMES[result.score]})"
