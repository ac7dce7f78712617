"""
Console game for TicTacToe.

This script ties together:
- Game state (board, move history)
- Move validation (parsing what the player types)
- AI (minimax / alpha-beta search)

Run this script to play TicTacToe against the engine!
"""

import argparse
from typing import Callable, Optional, Tuple

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .player import CellMark, Outcome


_validator = MoveValidator()


def apply_human_move(state: GameState, text: str) -> Tuple[GameState, ValidationResult]:
    """
    Play what the human typed ("1".."9") on the board.

    Args:
        state: Current game.
        text: Raw console input.

    Returns:
        (state, result). The state is only changed when result.is_valid.
    """
    parsed = _validator.parse_position(text)
    if not parsed.is_valid:
        return state, parsed

    return state, state.make_move(parsed.index, state.human_mark)


def apply_engine_move(state: GameState, ai: AIPlayer) -> Tuple[GameState, Optional[int]]:
    """
    Let the engine play its move, if the game is not over.

    Returns:
        (state, index played or None).
    """
    index = ai.make_move(state.board)
    if index is not None:
        state.record_move(index, ai.mark)
    return state, index


def result_message(state: GameState, config=GameConfig) -> str:
    """End-of-game message from the human's point of view."""
    outcome = state.outcome
    if outcome == Outcome.DRAW:
        return config.MESSAGE_DRAW
    if state.winner == state.human_mark:
        return config.MESSAGE_WIN
    return config.MESSAGE_LOSE


class TicTacToeConsole:
    """
    Console controller for one game against the engine.

    Game flow:
    1. The board is printed
    2. The human types a position (1-9), '?' for a hint, or 'q' to quit
    3. The engine answers with its best move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_mark: CellMark = CellMark.O,
        engine_first: bool = GameConfig.ENGINE_FIRST,
        algorithm: str = GameConfig.ALGORITHM,
        depth: int = GameConfig.SEARCH_DEPTH,
        debug: bool = GameConfig.DEBUG_MODE,
        image_path: Optional[str] = None,
        output: Callable[[str], None] = print
    ):
        """
        Initialize the console game.

        Args:
            human_mark: Which mark the human plays.
            engine_first: If True, the engine opens the game.
            algorithm: Search algorithm for the engine.
            depth: Search depth for the engine.
            debug: Print search statistics after every engine move.
            image_path: Save a snapshot of the final board here.
            output: Where text goes (print by default).
        """
        self.output = output
        self.engine_first = engine_first
        self.debug = debug
        self.image_path = image_path

        self.game_state = GameState.new(human_mark)
        self.ai = AIPlayer(self.game_state.engine_mark, algorithm=algorithm, depth=depth)
        self.is_running = False

        self.output(f"You play {self.game_state.human_mark.glyph}, "
                    f"engine plays {self.game_state.engine_mark.glyph} ({algorithm}).")

    def play(self, input_func: Optional[Callable[[str], str]] = None) -> GameState:
        """
        Play one game.

        Args:
            input_func: Reads one line of player input (default: input).

        Returns:
            The final game state (is_game_over is False if the player quit).
        """
        input_func = input_func or input
        self.is_running = True

        if self.engine_first:
            self._engine_move()

        while self.is_running and not self.game_state.is_game_over:
            self.output(f"--- Game ---\n{self.game_state.board.render()}")

            try:
                text = input_func(GameConfig.PROMPT)
            except EOFError:
                text = GameConfig.QUIT_COMMANDS[0]

            if not self._process_input(text):
                continue

            if not self.game_state.is_game_over:
                self._engine_move()

        if self.game_state.is_game_over:
            self._show_game_result()
        else:
            self.output("Game quit by user.")

        return self.game_state

    def _process_input(self, text: str) -> bool:
        """
        Handle one line of input.

        Returns:
            True if the human made a move.
        """
        command = text.strip().lower()

        if command in GameConfig.QUIT_COMMANDS:
            self.is_running = False
            return False

        if command == GameConfig.HINT_COMMAND:
            hint = self.ai.get_move_suggestion(self.game_state.board, self.game_state.human_mark)
            self.output(f"Hint: {hint}")
            return False

        self.game_state, result = apply_human_move(self.game_state, text)
        if not result.is_valid:
            self.output(f"{result.error_message} Try again.")
            return False

        return True

    def _engine_move(self):
        """Execute the engine's move."""
        self.game_state, index = apply_engine_move(self.game_state, self.ai)

        if index is None:
            return

        self.output(f"Engine plays at {index + 1}")
        if self.debug:
            self.output(f"Engine evaluated {self.ai.nodes_evaluated} positions "
                        f"({self.ai.algorithm}, depth {self.ai.depth}).")

    def _show_game_result(self):
        """Show the final board and result."""
        self.output(f"--- Game ---\n{self.game_state.board.render()}")
        self.output(f"Result: {result_message(self.game_state)}")

        if self.image_path:
            # OpenCV is only needed for snapshots
            from .board_image import save_board_image

            if save_board_image(self.game_state.board, self.image_path):
                self.output(f"Saved: {self.image_path}")
            else:
                self.output(f"ERROR: Could not save board image to {self.image_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe against a minimax engine")
    parser.add_argument(
        "--human-mark",
        choices=["X", "O"],
        default=GameConfig.HUMAN_MARK,
        help="Mark the human plays (X is the maximizing side)"
    )
    parser.add_argument(
        "--engine-first",
        action="store_true",
        help="Let the engine make the first move"
    )
    parser.add_argument(
        "--algorithm",
        choices=GameConfig.ALGORITHMS,
        default=GameConfig.ALGORITHM,
        help="Search algorithm for the engine"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=GameConfig.SEARCH_DEPTH,
        help="Search depth in plies (9 = full game tree)"
    )
    parser.add_argument(
        "--save-image",
        metavar="PATH",
        help="Save a picture of the final board (e.g. board.png)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.depth < 0:
        print("ERROR: --depth must be 0 or more")
        return 2

    game = TicTacToeConsole(
        human_mark=CellMark(args.human_mark),
        engine_first=args.engine_first,
        algorithm=args.algorithm,
        depth=args.depth,
        debug=args.debug or GameConfig.DEBUG_MODE,
        image_path=args.save_image
    )

    try:
        game.play()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
