"""Minesweeper on a rectangular field with 1-based coordinates."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import TextIO

ROWS = 9
COLS = 9
EASY_COUNT = 10


class RevealResult(Enum):
    """What happened when a cell was uncovered."""

    SAFE = "safe"
    MINE = "mine"
    REPEATED = "repeated"
    INVALID = "invalid"


class Minefield:
    """A field of hidden mines and the cells the player has uncovered."""

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        mine_count: int = EASY_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the field needs at least one row and one column")
        if not 0 <= mine_count <= rows * cols:
            raise ValueError("mine count does not fit on the field")
        self.rows = rows
        self.cols = cols
        self.mine_count = mine_count
        self.rng = rng if rng is not None else random.Random()
        self.mines: set[tuple[int, int]] = set()
        self.revealed: dict[tuple[int, int], int] = {}

    def _in_range(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def place_mines(self) -> None:
        """Scatter ``mine_count`` mines over distinct random cells."""
        cells = [
            (row, col)
            for row in range(1, self.rows + 1)
            for col in range(1, self.cols + 1)
        ]
        self.mines = set(self.rng.sample(cells, self.mine_count))

    def neighbour_mines(self, row: int, col: int) -> int:
        """Count the mines in the eight cells around ``(row, col)``."""
        if not self._in_range(row, col):
            raise ValueError(f"cell ({row}, {col}) is outside the field")
        return sum(
            (row + dr, col + dc) in self.mines
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr, dc) != (0, 0)
        )

    def reveal(self, row: int, col: int) -> RevealResult:
        """Uncover a cell and report the result."""
        if not self._in_range(row, col):
            return RevealResult.INVALID
        if (row, col) in self.revealed:
            return RevealResult.REPEATED
        if (row, col) in self.mines:
            return RevealResult.MINE
        self.revealed[(row, col)] = self.neighbour_mines(row, col)
        return RevealResult.SAFE

    def _cell(self, row: int, col: int, show_mines: bool) -> str:
        if show_mines:
            return "1" if (row, col) in self.mines else "0"
        count = self.revealed.get((row, col))
        return "*" if count is None else str(count)

    def render(self, show_mines: bool = False) -> str:
        """Draw the field: uncovered counts, or the mine layout if ``show_mines``."""
        rule = "-" * (self.cols + 10)
        lines = [rule, "".join(f"{i} " for i in range(self.cols + 1))]
        for row in range(1, self.rows + 1):
            cells = "".join(
                f"{self._cell(row, col, show_mines)} "
                for col in range(1, self.cols + 1)
            )
            lines.append(f"{row} {cells}")
        lines.append(rule)
        return "\n".join(lines) + "\n"

    def is_won(self) -> bool:
        """True once every cell without a mine has been uncovered."""
        return len(self.revealed) == self.rows * self.cols - self.mine_count


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


def _game(tokens: Iterator[str], out: TextIO, rng: random.Random) -> None:
    field = Minefield(rng=rng)
    field.place_mines()
    out.write(field.render())
    while not field.is_won():
        out.write("输入行号和列号")
        row = _next_int(tokens)
        col = _next_int(tokens)
        if row is None or col is None:
            out.write("输入有误")
            continue
        result = field.reveal(row, col)
        if result is RevealResult.REPEATED:
            out.write("请勿重复点击")
        elif result is RevealResult.INVALID:
            out.write("输入有误")
        elif result is RevealResult.MINE:
            out.write("你死了")
            out.write(field.render(show_mines=True))
            return
        else:
            out.write(field.render())
    out.write("你赢啦")
    out.write(field.render())


def play(
    lines: Iterable[str], out: TextIO, rng: random.Random | None = None
) -> None:
    """Run the menu and games, reading whitespace-separated numbers from ``lines``."""
    rng = rng if rng is not None else random.Random()
    tokens = _tokens(lines)
    try:
        while True:
            out.write("1. Play\n0. Exit\n")
            out.write("请选择\n ")
            choice = _next_int(tokens)
            if choice == 1:
                _game(tokens, out, rng)
            elif choice == 0:
                out.write("退出游戏'\n")
                return
            else:
                out.write("输入错误\n")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Play on the terminal."""
    del argv
    play(sys.stdin, sys.stdout, random.Random())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())