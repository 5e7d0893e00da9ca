# pocketgames

Two small games that you play in a terminal. The package also has a singly
linked list and a few classic programming drills, written as plain functions
that you can import.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Games

Both games read whitespace-separated numbers from standard input. Their
prompts are in Chinese. A session ends when you choose `0` at the menu or
when the input runs out. Text that is not a number counts as a wrong entry.

### Minesweeper

```
pocketgames-minesweeper
```

The menu offers `1` to play and `0` to exit. The field has 9 rows and 9
columns and holds 10 mines. Enter a row number and a column number, both
counted from 1, to open a cell. An opened cell shows how many of its eight
neighbours hold a mine. Cells you have not opened show as `*`. Opening a cell
a second time, or giving a coordinate off the field, is refused with a
message. If you open a mine you lose, and the field is drawn with every mine
shown as `1` and every safe cell as `0`. If you open every safe cell you win.
After either result the menu comes back.

From code, use `pocketgames.minesweeper`:

- `Minefield(rows=9, cols=9, mine_count=10, rng=None)` raises `ValueError`
  for an empty field or for a mine count that does not fit.
- `place_mines()` scatters the mines over distinct random cells.
- `neighbour_mines(row, col)` counts the mines around a cell. It raises
  `ValueError` for a cell outside the field.
- `reveal(row, col)` returns a `RevealResult`: `SAFE`, `MINE`, `REPEATED` or
  `INVALID`.
- `render(show_mines=False)` draws the field as text.
- `is_won()` returns whether every safe cell has been opened.
- `play(lines, out, rng=None)` runs a whole session. It reads from any
  iterable of text lines and writes to any text stream.

```python
import io
import random

from pocketgames.minesweeper import play

out = io.StringIO()
play(["1", "5 5", "0"], out, random.Random(1))
print(out.getvalue())
```

### Tic-tac-toe

```
pocketgames-tictactoe
```

You play `*` against the computer, which plays `#` on a random free square.
Enter a row and a column from 1 to 3. If the square is taken or the
coordinate is off the board, the game refuses it and asks again. A game ends
when one side completes a row, a column or a diagonal. It ends in a draw when
the board is full with no winner.

From code, use `pocketgames.tictactoe`:

- `Board(rows=3, cols=3)` creates the board.
- `place(row, col, mark)` uses 1-based coordinates. It raises `IndexError`
  off the board and `ValueError` on a taken square.
- `is_full()` returns whether every square is taken.
- `outcome()` returns an `Outcome`: `PLAYER`, `COMPUTER`, `DRAW` or
  `CONTINUE`.
- `computer_move(rng)` marks a random empty square and returns it. It raises
  `ValueError` when the board is full.
- `render()` draws the board as text.
- `play(lines, out, rng=None)` runs a scripted session.

## Linked list

```
pocketgames-linkedlist
```

This command pushes 5, 3, 9 and 1 onto the front of a list and prints it. It
then sorts the list and prints it again, deletes 3, and prints the result.

The `LinkedList` class can also be used directly. `add` inserts at the
head. `delete` removes the first matching value and does nothing if the value
is absent. `sort` orders the values in ascending order. `render` gives the
list as `a -> b -> NULL`. The class also supports `len()` and iteration.

```python
from pocketgames.linkedlist import LinkedList

items = LinkedList([5, 3, 9, 1])   # keeps the given order
items.sort()
items.delete(3)
print(items.render())              # 1 -> 5 -> 9 -> NULL
print(len(items), list(items))     # 3 [1, 5, 9]
```

## Drills

`pocketgames.drills` collects small exercises as functions:

- `binary_search(items, key)` returns an index of `key` in a sorted sequence.
  It raises `ValueError` if the key is absent.
- `is_prime(n)` tests by trial division up to the square root of `n`. Values
  below 4 have no candidate divisor and are reported as prime.
- `primes_between(start, stop)` returns the numbers in the inclusive range
  that pass `is_prime`.
- `sort_descending(values)` returns the values from largest to smallest.
- `alternating_harmonic(terms=99)` returns the sum 1 − 1/2 + 1/3 − … over the
  given number of terms.
- `string_length(text)` counts characters up to the first NUL character.
- `multiply_matrices(a, b)` returns the matrix product. It raises
  `ValueError` when the shapes do not match.
- `add(x, y)` returns the sum of the two numbers.
- `check_login(attempts, password, limit=3)` returns whether one of the first
  `limit` attempts matches.
- `weekday_name(day)` and `day_kind(day)` take a day from 1 to 7 and return
  its name or whether it is a working day or a rest day. Both raise
  `ValueError` for any other number.

```python
from pocketgames.drills import add, binary_search, is_prime

binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 7)  # 6
is_prime(101)                                       # True
add(2, 3)                                           # 5
```

## What it does not do

The games are text only, with no graphical screen. There is no difficulty
setting on the command line; the minesweeper command always uses a 9 × 9
field with 10 mines. Opening a cell with no neighbouring mines opens only
that cell, not the cells around it. Games, scores and settings are not
saved between sessions.