from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Set, Tuple

from coincrush.components.coin_types import DEFAULT_COINS
from coincrush.constants import (
    GRID_SIZE,
    MATCH_LENGTH,
    MAX_CASCADES,
    MAX_GENERATION_ATTEMPTS,
    MAX_PLAYABLE_ATTEMPTS,
)

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]
Cells = Sequence[Optional[int]]
SwapPair = Tuple[int, int]

DEFAULT_KIND_COUNT = len(DEFAULT_COINS)
# Marks a cleared cell during resolution; never present in a returned board.
EMPTY = None


class InvalidBoardError(ValueError):
    """Raised for a malformed board, size, kind count or position."""


class GenerationError(RuntimeError):
    """Raised when board generation exceeds its attempt budget."""


class CascadeLimitError(RuntimeError):
    """Raised when resolution keeps finding matches past MAX_CASCADES passes."""


@dataclass(frozen=True, slots=True)
class ResolveResult:
    board: List[int]
    cleared: int
    cascades: int


def to_row_col(index: int, size: int) -> Tuple[int, int]:
    _check_size(size)
    _check_position(index, size)
    return index // size, index % size


def to_index(row: int, col: int, size: int) -> int:
    _check_size(size)
    if not (0 <= row < size and 0 <= col < size):
        raise InvalidBoardError(f"cell ({row}, {col}) is outside a {size}x{size} board")
    return row * size + col


def is_adjacent(a: int, b: int, size: int) -> bool:
    ar, ac = to_row_col(a, size)
    br, bc = to_row_col(b, size)
    return abs(ar - br) + abs(ac - bc) == 1


def create_board(
    size: int = GRID_SIZE,
    rng: RandomSource = random.random,
    kinds: int = DEFAULT_KIND_COUNT,
    *,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
) -> List[int]:
    """Fill a size x size board row by row so that no run of three exists."""
    _check_size(size)
    _check_kinds(kinds)
    cells: List[int] = [0] * (size * size)
    for row in range(size):
        for col in range(size):
            for _ in range(max_attempts):
                kind = _random_kind(rng, kinds)
                if not _completes_run(cells, row, col, size, kind):
                    break
            else:
                raise GenerationError(
                    f"no kind fits cell ({row}, {col}) after {max_attempts} draws"
                )
            cells[row * size + col] = kind
    return cells


def create_playable_board(
    size: int = GRID_SIZE,
    rng: RandomSource = random.random,
    kinds: int = DEFAULT_KIND_COUNT,
    *,
    max_attempts: int = MAX_PLAYABLE_ATTEMPTS,
) -> List[int]:
    """Generate boards until one has no matches and at least one valid move."""
    for attempt in range(1, max_attempts + 1):
        cells = create_board(size, rng, kinds)
        if has_any_moves(cells, size):
            if attempt > 1:
                logger.info("playable %sx%s board found after %d attempts", size, size, attempt)
            return cells
    raise GenerationError("Unable to generate a board with a valid swap")


def swap_cells(cells: Cells, a: int, b: int) -> List[int]:
    """Return a copy of cells with positions a and b exchanged."""
    size = _side_of(cells)
    _check_position(a, size)
    _check_position(b, size)
    swapped = list(cells)
    swapped[a], swapped[b] = swapped[b], swapped[a]
    return swapped


def find_matches(cells: Cells, size: int) -> Set[int]:
    """Return every position in a horizontal or vertical run of three or more."""
    _check_board(cells, size, allow_empty=True)
    matches: Set[int] = set()
    # Horizontal runs
    for row in range(size):
        _collect_runs(cells, [row * size + col for col in range(size)], matches)
    # Vertical runs
    for col in range(size):
        _collect_runs(cells, [row * size + col for row in range(size)], matches)
    return matches


def swap_creates_match(cells: Cells, size: int, a: int, b: int) -> bool:
    """Return True if swapping a and b would leave a match on the board."""
    _check_board(cells, size)
    _check_position(a, size)
    _check_position(b, size)
    # Equal values make the swap a no-op.
    if cells[a] == cells[b]:
        return False
    return bool(find_matches(swap_cells(cells, a, b), size))


def collapse(
    cells: Cells,
    size: int,
    rng: RandomSource = random.random,
    kinds: int = DEFAULT_KIND_COUNT,
) -> List[int]:
    """Drop surviving values to the bottom of each column and refill the top."""
    _check_board(cells, size, allow_empty=True)
    _check_kinds(kinds)
    collapsed: List[Optional[int]] = list(cells)
    for col in range(size):
        survivors: List[int] = []
        for row in range(size - 1, -1, -1):
            value = collapsed[row * size + col]
            if value is not EMPTY:
                survivors.append(value)
        for offset, row in enumerate(range(size - 1, -1, -1)):
            if offset < len(survivors):
                collapsed[row * size + col] = survivors[offset]
            else:
                collapsed[row * size + col] = _random_kind(rng, kinds)
    return collapsed  # type: ignore[return-value]


def resolve_board(
    cells: Cells,
    size: int,
    rng: RandomSource = random.random,
    kinds: int = DEFAULT_KIND_COUNT,
    *,
    max_cascades: int = MAX_CASCADES,
) -> ResolveResult:
    """Clear matches and refill until the board is stable."""
    _check_board(cells, size)
    working = list(cells)
    cleared = 0
    cascades = 0
    while True:
        matches = find_matches(working, size)
        if not matches:
            break
        if cascades >= max_cascades:
            raise CascadeLimitError(f"board still matching after {cascades} cascades")
        cleared += len(matches)
        cascades += 1
        cleared_cells: List[Optional[int]] = list(working)
        for index in matches:
            cleared_cells[index] = EMPTY
        working = collapse(cleared_cells, size, rng, kinds)
    if cascades:
        logger.debug("resolved %d cells over %d cascades", cleared, cascades)
    return ResolveResult(board=working, cleared=cleared, cascades=cascades)


def find_valid_swaps(cells: Cells, size: int) -> List[SwapPair]:
    """Enumerate adjacent swaps that would produce a match, in scan order."""
    return list(_iter_valid_swaps(cells, size))


def find_hint(cells: Cells, size: int) -> Optional[SwapPair]:
    for pair in _iter_valid_swaps(cells, size):
        return pair
    return None


def has_any_moves(cells: Cells, size: int) -> bool:
    return find_hint(cells, size) is not None


def _iter_valid_swaps(cells: Cells, size: int):
    _check_board(cells, size)
    for index in range(size * size):
        row, col = divmod(index, size)
        if col + 1 < size and swap_creates_match(cells, size, index, index + 1):
            yield index, index + 1
        if row + 1 < size and swap_creates_match(cells, size, index, index + size):
            yield index, index + size


def _collect_runs(cells: Cells, line: List[int], matches: Set[int]) -> None:
    run_start = 0
    run_value = cells[line[0]]
    for offset in range(1, len(line) + 1):
        value = cells[line[offset]] if offset < len(line) else EMPTY
        if value is not EMPTY and value == run_value:
            continue
        if run_value is not EMPTY and offset - run_start >= MATCH_LENGTH:
            matches.update(line[run_start:offset])
        run_start = offset
        run_value = value


def _completes_run(cells: List[int], row: int, col: int, size: int, kind: int) -> bool:
    if col >= 2:
        left1 = cells[row * size + col - 1]
        left2 = cells[row * size + col - 2]
        if left1 == kind and left2 == kind:
            return True
    if row >= 2:
        up1 = cells[(row - 1) * size + col]
        up2 = cells[(row - 2) * size + col]
        if up1 == kind and up2 == kind:
            return True
    return False


def _random_kind(rng: RandomSource, kinds: int) -> int:
    draw = rng()
    if not 0.0 <= draw < 1.0:
        raise InvalidBoardError(f"random source produced {draw}; expected a value in [0, 1)")
    return int(draw * kinds)


def _side_of(cells: Cells) -> int:
    length = len(cells)
    size = math.isqrt(length)
    if size < 1 or size * size != length:
        raise InvalidBoardError(f"board of {length} cells is not square")
    return size


def _check_board(cells: Cells, size: int, *, allow_empty: bool = False) -> None:
    _check_size(size)
    if len(cells) != size * size:
        raise InvalidBoardError(f"board has {len(cells)} cells; expected {size * size}")
    if not allow_empty and any(value is EMPTY for value in cells):
        raise InvalidBoardError("board contains empty cells")


def _check_size(size: int) -> None:
    if size < 1:
        raise InvalidBoardError(f"board size must be positive, got {size}")


def _check_kinds(kinds: int) -> None:
    if kinds < 1:
        raise InvalidBoardError(f"need at least one coin kind, got {kinds}")


def _check_position(index: int, size: int) -> None:
    if not 0 <= index < size * size:
        raise InvalidBoardError(f"position {index} is outside a {size}x{size} board")
