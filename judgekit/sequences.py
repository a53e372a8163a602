"""Exercises over lists, grids and small collections of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

CHESS_SET = (1, 1, 2, 2, 2, 8)
REMAINDER_DIVISOR = 42
CLASS_SIZE = 30
COIN_UNITS = (25, 10, 5, 1)
PAPER_SIZE = 100
SHEET_SIZE = 10
DISTANCE_MAX = 1000


def _check_range(n: int, start: int, end: int) -> None:
    if not 1 <= start <= end <= n:
        raise ValueError(f"range {start}..{end} outside 1..{n}")


def count_value(values: Iterable[int], target: int) -> int:
    """Return how many times `target` occurs in `values`."""
    return sum(1 for value in values if value == target)


def fill_baskets(n: int, ranges: Iterable[tuple[int, int, int]]) -> list[int]:
    """Put ball `num` into baskets start..end for each range; 0 means empty."""
    baskets = [0] * n
    for start, end, num in ranges:
        _check_range(n, start, end)
        baskets[start - 1:end] = [num] * (end - start + 1)
    return baskets


def reverse_baskets(n: int, ranges: Iterable[tuple[int, int]]) -> list[int]:
    """Reverse baskets left..right in turn, starting from 1..n in order."""
    baskets = list(range(1, n + 1))
    for left, right in ranges:
        _check_range(n, left, right)
        baskets[left - 1:right] = baskets[left - 1:right][::-1]
    return baskets


def swap_balls(n: int, swaps: Iterable[tuple[int, int]]) -> list[int]:
    """Swap the balls in the given basket pairs, starting from 1..n."""
    balls = list(range(1, n + 1))
    for first, second in swaps:
        _check_range(n, min(first, second), max(first, second))
        balls[first - 1], balls[second - 1] = balls[second - 1], balls[first - 1]
    return balls


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest value."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return min(items), max(items)


def below(values: Iterable[int], limit: int) -> list[int]:
    """Return the values smaller than `limit`, in order."""
    return [value for value in values if value < limit]


def max_with_position(values: Iterable[int]) -> tuple[int, int]:
    """Return the largest positive value and its first 1-based position.

    Non-positive values never win, so (0, 0) comes back when none is positive.
    """
    best, position = 0, 0
    for index, value in enumerate(values, start=1):
        if value > best:
            best, position = value, index
    return best, position


def grid_max(grid: Iterable[Iterable[int]]) -> tuple[int, int, int]:
    """Return the largest value and its last 1-based row and column."""
    best = 0
    found: tuple[int, int] | None = None
    for row, cells in enumerate(grid, start=1):
        for col, value in enumerate(cells, start=1):
            if value >= best:
                best, found = value, (row, col)
    if found is None:
        raise ValueError("grid holds no non-negative value")
    return best, found[0], found[1]


def chess_shortfall(pieces: Sequence[int]) -> list[int]:
    """Return how many of each piece must be added to complete a chess set."""
    if len(pieces) != len(CHESS_SET):
        raise ValueError(f"expected {len(CHESS_SET)} piece counts")
    return [base - have for base, have in zip(CHESS_SET, pieces)]


def distinct_remainders(values: Iterable[int]) -> int:
    """Return how many distinct remainders the values leave modulo 42."""
    return len({value % REMAINDER_DIVISOR for value in values})


def missing_students(submitted: Iterable[int]) -> list[int]:
    """Return the class numbers, in order, that did not hand in homework."""
    handed_in = set(submitted)
    return [n for n in range(1, CLASS_SIZE + 1) if n not in handed_in]


def curved_mean(scores: Sequence[int]) -> float:
    """Return the mean after rescaling every score against the best one."""
    if not scores:
        raise ValueError("no scores given")
    best = max(scores)
    return sum(score / best * 100 for score in scores) / len(scores)


def coin_change(cents: int) -> tuple[int, ...]:
    """Return how many quarters, dimes, nickels and pennies make up `cents`."""
    counts = []
    for unit in COIN_UNITS:
        count, cents = divmod(cents, unit)
        counts.append(count)
    return tuple(counts)


def matrix_add(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(a) != len(b) or any(len(ra) != len(rb) for ra, rb in zip(a, b)):
        raise ValueError("matrices differ in shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def covered_area(papers: Iterable[tuple[int, int]]) -> int:
    """Return the area covered by 10x10 black sheets on a 100x100 paper."""
    cells: set[tuple[int, int]] = set()
    for x, y in papers:
        if not (0 <= x <= PAPER_SIZE - SHEET_SIZE and 0 <= y <= PAPER_SIZE - SHEET_SIZE):
            raise ValueError(f"sheet at ({x}, {y}) leaves the paper")
        cells.update(
            (row, col)
            for row in range(y, y + SHEET_SIZE)
            for col in range(x, x + SHEET_SIZE)
        )
    return len(cells)


def _odd_one(values: Sequence[int]) -> int:
    for i, j in combinations(range(len(values)), 2):
        if values[i] == values[j]:
            return next(values[k] for k in range(len(values)) if k not in (i, j))
    return values[0]


def fourth_vertex(points: Sequence[tuple[int, int]]) -> tuple[int, int]:
    """Return the corner that completes an axis-aligned rectangle."""
    if len(points) != 3:
        raise ValueError("exactly three points are needed")
    return _odd_one([p[0] for p in points]), _odd_one([p[1] for p in points])


def dice_prize(dice: Sequence[int]) -> int:
    """Return the prize money for a roll of three dice."""
    if len(dice) != 3 or any(not 1 <= d <= 6 for d in dice):
        raise ValueError("three dice with faces 1..6 are needed")
    counts = Counter(dice)
    for face in range(1, 7):
        if counts[face] == 3:
            return 10000 + 1000 * face
        if counts[face] == 2:
            return 1000 + 100 * face
    return 100 * max(dice)


def receipt_matches(total: int, items: Iterable[tuple[int, int]]) -> bool:
    """Return whether price * quantity over all items adds up to `total`."""
    return total == sum(price * quantity for price, quantity in items)


def nearest_edge(x: int, y: int, w: int, h: int) -> int:
    """Return the shortest distance from (x, y) to the rectangle's border."""
    return min(DISTANCE_MAX, x, y, w - x, h - y)