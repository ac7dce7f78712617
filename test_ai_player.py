"""
Tests for the minimax / alpha-beta engine.
"""

import pytest

from tictactoe.ai_player import AIPlayer, SearchResult, alphabeta, minimax
from tictactoe.game_state import Board
from tictactoe.player import CellMark, Outcome


X, O = CellMark.X, CellMark.O


def mover(board: Board, first: CellMark = X) -> CellMark:
    """Whose turn it is on a board where `first` opened the game."""
    counts = {mark: board.cells.count(mark) for mark in (X, O)}
    second = first.opposite()
    return first if counts[first] == counts[second] else second


def late_positions(min_marks: int):
    """Reachable, unfinished boards with at least min_marks marks, with the side to move."""
    positions = []
    for first in (X, O):
        seen = set()
        stack = [Board()]
        while stack:
            board = stack.pop()
            if board.cells in seen:
                continue
            seen.add(board.cells)
            if board.is_terminal():
                continue
            turn = mover(board, first)
            if board.occupied_count() >= min_marks:
                positions.append((board, turn))
            for index in board.legal_moves():
                child = board.copy()
                child.place(index, turn)
                stack.append(child)
    return positions


# ==================== SCENARIOS ====================

@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_takes_immediate_win(search):
    board = Board.from_string("XX.OO....")
    result = search(board, 9, X)

    assert result == SearchResult(2, Outcome.FIRST_PLAYER_WINS)


@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_second_player_finds_a_winning_move(search):
    # O wins at 5 now, or at 2 with a double threat; ties keep the earliest
    board = Board.from_string("XX.OO....")
    result = search(board, 9, O)

    assert result == SearchResult(2, Outcome.SECOND_PLAYER_WINS)


@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_blocks_opponent_win(search):
    board = Board.from_string("XX...O...")
    result = search(board, 9, O)

    # Blocking at 2 also sets up a win for O
    assert result == SearchResult(2, Outcome.SECOND_PLAYER_WINS)


@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_search_does_not_modify_board(search):
    board = Board.from_string("X...O....")
    before = board.copy()
    search(board, 9, X)

    assert board == before


@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_terminal_board_returns_no_move(search):
    board = Board.from_string("XXXOO....")
    assert search(board, 9, O) == SearchResult(None, Outcome.FIRST_PLAYER_WINS)

    full = Board.from_string("XOXXOOOXX")
    assert search(full, 9, X) == SearchResult(None, Outcome.DRAW)


@pytest.mark.parametrize("search", [minimax, alphabeta])
def test_depth_zero_evaluates_in_place(search):
    assert search(Board.from_string("XX.OO...."), 0, X) == SearchResult(None, Outcome.DRAW)


def test_minimax_ties_keep_earliest_move():
    # One ply: every move leaves a non-terminal board, all score DRAW
    assert minimax(Board(), 1, X) == SearchResult(0, Outcome.DRAW)
    assert minimax(Board.from_string("X........"), 1, O) == SearchResult(1, Outcome.DRAW)


def test_all_moves_lose_still_returns_a_move():
    # O to move, X threatens 5, 6 and 8
    board = Board.from_string("XOOXX....")
    result = minimax(board, 9, O)

    assert result == SearchResult(5, Outcome.FIRST_PLAYER_WINS)
    assert alphabeta(board, 9, O).score == Outcome.FIRST_PLAYER_WINS


# ==================== WHOLE GAME TREE ====================

def test_empty_board_is_a_draw_with_alphabeta():
    assert alphabeta(Board(), 9, X).score == Outcome.DRAW
    assert alphabeta(Board(), 9, O).score == Outcome.DRAW


def test_empty_board_is_a_draw_with_minimax():
    assert minimax(Board(), 9, X).score == Outcome.DRAW


def test_minimax_and_alphabeta_agree():
    positions = late_positions(min_marks=5)
    assert positions

    for board, turn in positions:
        plain = minimax(board, 9, turn)
        pruned = alphabeta(board, 9, turn)
        assert plain.score == pruned.score, board

        # The pruned choice must really guarantee the score
        played = board.copy()
        played.place(pruned.index, turn)
        assert minimax(played, 9, turn.opposite()).score == pruned.score, board


def test_alphabeta_visits_fewer_nodes():
    plain = AIPlayer(X, algorithm="minimax")
    pruned = AIPlayer(X, algorithm="alphabeta")
    board = Board.from_string("....O....")

    assert plain.search(board).score == pruned.search(board).score
    assert 0 < pruned.nodes_evaluated < plain.nodes_evaluated


# ==================== AI PLAYER ====================

def test_make_move_places_winning_move():
    board = Board.from_string("XX.OO....")
    ai = AIPlayer(X)

    assert ai.make_move(board) == 2
    assert board == Board.from_string("XXXOO....")
    assert board.evaluate() == Outcome.FIRST_PLAYER_WINS


def test_make_move_on_terminal_board_is_noop():
    board = Board.from_string("OOOXX.X..")
    ai = AIPlayer(X)

    assert ai.make_move(board) is None
    assert board == Board.from_string("OOOXX.X..")
    assert ai.get_best_move(board) is None


def test_make_move_with_depth_zero_plays_first_legal_move():
    board = Board.from_string("X...O....")
    ai = AIPlayer(X, depth=0)

    assert ai.make_move(board) == 1
    assert board[1] == X


def test_engine_never_loses_to_first_move_player():
    """The human-side always takes the first legal cell; the engine must not lose."""
    for engine_mark in (X, O):
        ai = AIPlayer(engine_mark)
        board = Board()
        turn = X
        while not board.is_terminal():
            if turn == engine_mark:
                ai.make_move(board)
            else:
                board.place(next(board.legal_moves()), turn)
            turn = turn.opposite()

        assert board.winner() in (None, engine_mark)


def test_self_play_is_a_draw():
    x_ai, o_ai = AIPlayer(X), AIPlayer(O)
    board = Board()
    players = [x_ai, o_ai]
    while not board.is_terminal():
        players[0].make_move(board)
        players.reverse()

    assert board.is_full()
    assert board.evaluate() == Outcome.DRAW


def test_move_suggestion():
    board = Board.from_string("XX.OO....")
    ai = AIPlayer(X)

    assert ai.get_move_suggestion(board) == "Play at 3 (expected result: X wins)"
    assert ai.get_move_suggestion(board, O) == "Play at 3 (expected result: O wins)"
    assert ai.get_move_suggestion(Board.from_string("XXXOO....")) == "No moves available!"


@pytest.mark.parametrize("kwargs", [
    {"mark": CellMark.EMPTY},
    {"algorithm": "negamax"},
    {"depth": -1},
])
def test_invalid_ai_settings(kwargs):
    with pytest.raises(ValueError):
        AIPlayer(**kwargs)
