"""Small pygame games and scenes: tic-tac-toe, a shape memory game and drawing demos."""

__version__ = "0.1.0"
__all__ = ["tictactoe", "memory", "shapes", "tictactoe_app", "memory_app", "labs"]