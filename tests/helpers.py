from __future__ import annotations

from itertools import cycle
from typing import Callable, Iterable, List

from coincrush.systems.board_ops import DEFAULT_KIND_COUNT


def constant_rng(value: float) -> Callable[[], float]:
    """Random source that always returns the same draw."""

    return lambda: value


def kinds_rng(kinds: Iterable[int], kind_count: int = DEFAULT_KIND_COUNT) -> Callable[[], float]:
    """Random source that draws the given kinds in order, repeating forever."""

    draws = cycle([(kind + 0.5) / kind_count for kind in kinds])
    return lambda: next(draws)


def stalemate_cells(size: int) -> List[int]:
    """Diagonal stripes of three kinds: no matches and no valid swap."""

    return [(row + col) % 3 for row in range(size) for col in range(size)]


def one_move_cells() -> List[int]:
    """5x5 stalemate board where swapping 2 and 7 completes 3,3,3 on row 0."""

    cells = stalemate_cells(5)
    cells[0] = 3
    cells[1] = 3
    cells[7] = 3
    return cells


def resolves_to_stalemate_cells() -> List[int]:
    """5x5 board whose only planned move (20 <-> 21) clears column 0 rows 2-4.

    The two survivors drop three rows, which keeps the (row + col) % 3 stripes,
    so refilling the top of column 0 with 2, 1, 0 (bottom up) leaves
    ``stalemate_cells(5)``.
    """

    cells = stalemate_cells(5)
    cells[10] = 3
    cells[15] = 3
    cells[20] = 2
    cells[21] = 3
    return cells
