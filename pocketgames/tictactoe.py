"""Noughts and crosses against a computer that moves at random."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TextIO

PLAYER_MARK = "*"
COMPUTER_MARK = "#"
EMPTY = " "


class Outcome(Enum):
    """State of the game after a move."""

    PLAYER = PLAYER_MARK
    COMPUTER = COMPUTER_MARK
    DRAW = "Q"
    CONTINUE = "C"


class Board:
    """A grid of cells, each empty or holding a player's mark."""

    def __init__(self, rows: int = 3, cols: int = 3) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the board needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self.cells = [[EMPTY] * cols for _ in range(rows)]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` at 1-based ``(row, col)``.

        Raises IndexError for a cell off the board, ValueError for a taken one.
        """
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        if self.cells[row - 1][col - 1] != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is taken")
        self.cells[row - 1][col - 1] = mark

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return all(cell != EMPTY for line in self.cells for cell in line)

    def _lines(self) -> Iterator[list[str]]:
        yield from self.cells
        yield from ([line[j] for line in self.cells] for j in range(self.cols))
        if self.rows == self.cols:
            size = self.rows
            yield [self.cells[i][i] for i in range(size)]
            yield [self.cells[i][size - 1 - i] for i in range(size)]

    def outcome(self) -> Outcome:
        """Report a winner, a draw on a full board, or that play goes on."""
        for line in self._lines():
            first = line[0]
            if first != EMPTY and all(cell == first for cell in line):
                return Outcome(first)
        if self.is_full():
            return Outcome.DRAW
        return Outcome.CONTINUE

    def computer_move(self, rng: random.Random) -> tuple[int, int]:
        """Mark a random empty cell for the computer and return it (1-based)."""
        empty = [
            (i + 1, j + 1)
            for i, line in enumerate(self.cells)
            for j, cell in enumerate(line)
            if cell == EMPTY
        ]
        if not empty:
            raise ValueError("the board is full")
        row, col = rng.choice(empty)
        self.place(row, col, COMPUTER_MARK)
        return row, col

    def render(self) -> str:
        """Draw the board with cell separators and a rule under every row."""
        rule = "|".join(["---"] * self.rows)
        lines: list[str] = []
        for line in self.cells:
            lines.append("|".join(f" {cell} " for cell in line))
            lines.append(rule)
        return "\n".join(lines) + "\n"


class _EndOfInput(Exception):
    pass


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    try:
        token = next(tokens)
    except StopIteration:
        raise _EndOfInput from None
    try:
        return int(token)
    except ValueError:
        return None


def _player_move(board: Board, tokens: Iterator[str], out: TextIO) -> None:
    out.write("玩家输入: >")
    while True:
        out.write("请输入坐标")
        row = _next_int(tokens)
        col = _next_int(tokens)
        if row is None or col is None:
            out.write("坐标非法\n")
            continue
        try:
            board.place(row, col, PLAYER_MARK)
        except IndexError:
            out.write("坐标非法\n")
        except ValueError:
            out.write("位置被占用\n")
        else:
            return


def _game(tokens: Iterator[str], out: TextIO, rng: random.Random) -> None:
    board = Board()
    out.write(board.render())
    while True:
        _player_move(board, tokens, out)
        result = board.outcome()
        if result is not Outcome.CONTINUE:
            break
        out.write("电脑下棋：>\n")
        board.computer_move(rng)
        result = board.outcome()
        if result is not Outcome.CONTINUE:
            break
        out.write(board.render())
    if result is Outcome.PLAYER:
        out.write("玩家赢")
    elif result is Outcome.COMPUTER:
        out.write("电脑赢")
    else:
        out.write("平局")


def play(
    lines: Iterable[str], out: TextIO, rng: random.Random | None = None
) -> None:
    """Run the menu and games, reading whitespace-separated numbers from ``lines``."""
    rng = rng if rng is not None else random.Random()
    tokens = _tokens(lines)
    banner = "*" * 32
    try:
        while True:
            out.write(f"{banner}\n******1 : play   0 : exit*******\n{banner}\n")
            out.write("请选择:\n")
            choice = _next_int(tokens)
            if choice == 1:
                _game(tokens, out, rng)
            elif choice == 0:
                out.write("推出游戏")
                return
            else:
                out.write("选择错误")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Play on the terminal."""
    del argv
    play(sys.stdin, sys.stdout, random.Random())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())