"""
Game configuration for TicTacToe.
All the settings for players, search, display and board snapshots.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line arguments override these defaults.
    """

    # ==================== PLAYER SETTINGS ====================
    # Marks are "X" or "O". X is the first player in scoring terms
    # (the maximizing side), not necessarily the one who moves first.
    HUMAN_MARK = "O"
    ENGINE_MARK = "X"

    # The human moves first unless --engine-first is given
    ENGINE_FIRST = False

    # ==================== SEARCH SETTINGS ====================
    ALGORITHMS = ["minimax", "alphabeta"]
    ALGORITHM = "alphabeta"

    # Plies to search. 9 covers the whole 3x3 game tree.
    SEARCH_DEPTH = 9

    # ==================== CONSOLE SETTINGS ====================
    PROMPT = "Enter number: "
    HINT_COMMAND = "?"
    QUIT_COMMANDS = ("q", "quit", "exit")

    # End-of-game messages, from the human's point of view
    MESSAGE_WIN = "You won!"
    MESSAGE_LOSE = "You lose!"
    MESSAGE_DRAW = "Draw."

    # ==================== SNAPSHOT IMAGE SETTINGS ====================
    IMAGE_SIZE = 400          # Pixels, square
    LINE_THICKNESS = 3        # Grid lines
    MARKER_THICKNESS = 8      # X and O strokes

    # Colours are BGR (OpenCV order)
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    X_COLOR = (255, 0, 0)         # Blue
    O_COLOR = (0, 0, 255)         # Red
    LABEL_COLOR = (160, 160, 160)  # Grey position numbers
    WIN_LINE_COLOR = (0, 200, 0)  # Green

    # ==================== DEBUG SETTINGS ====================
    # Print how many positions the engine searched for every move
    DEBUG_MODE = False
