"""Terminal minesweeper and tic-tac-toe, a linked list, and small programming drills."""

__version__ = "0.1.0"
__all__ = ["drills", "linkedlist", "minesweeper", "tictactoe"]