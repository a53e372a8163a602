"""Small arithmetic and formatting exercises."""

from __future__ import annotations

from collections.abc import Iterable

MINUTES_PER_DAY = 1440
BUDDHIST_ERA_OFFSET = 543
ALARM_ADVANCE_MINUTES = 45
_QUADRANT_BY_SIGNS = (1, 2, 4, 3)
_GRADES = "ABCD"

_DOG = (
    "         ,r'\"7\n"
    "r`-_   ,'  ,/\n"
    " \\. \". L_r'\n"
    "   `~\\/\n"
    "      |\n"
    "      |\n"
)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def divide(a: int, b: int) -> float:
    """Return the real quotient a / b."""
    return a / b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def modulo_identities(a: int, b: int, c: int) -> tuple[int, int, int, int]:
    """Return the four expressions that show how modulo distributes."""
    return (
        _trunc_mod(a + b, c),
        _trunc_mod(_trunc_mod(a, c) + _trunc_mod(b, c), c),
        _trunc_mod(a * b, c),
        _trunc_mod(_trunc_mod(a, c) * _trunc_mod(b, c), c),
    )


def four_operations(a: int, b: int) -> tuple[int, int, int, int, int]:
    """Return sum, difference, product, truncated quotient and remainder."""
    return a + b, a - b, a * b, _trunc_div(a, b), _trunc_mod(a, b)


def buddhist_to_gregorian(year: int) -> int:
    """Convert a Buddhist-era year to the Gregorian calendar."""
    return year - BUDDHIST_ERA_OFFSET


def long_multiplication(a: int, b: int) -> tuple[int, int, int, int]:
    """Return the partial products of a * b by b's digits, then the product."""
    return a * (b % 10), a * (b // 10 % 10), a * (b // 100), a * b


def oven_finish(hour: int, minute: int, duration: int) -> tuple[int, int]:
    """Return the clock time after cooking for `duration` minutes."""
    end = (hour * 60 + minute + duration) % MINUTES_PER_DAY
    return divmod(end, 60)


def alarm_before(hour: int, minute: int) -> tuple[int, int]:
    """Return the time 45 minutes before the given time."""
    total = hour * 60 + minute - ALARM_ADVANCE_MINUTES
    if total < 0:
        total += MINUTES_PER_DAY
    return divmod(total, 60)


def triangular_sum(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    return n * (n + 1) // 2


def snail_days(up: int, down: int, height: int) -> int:
    """Return the day a snail climbing `up` and slipping `down` reaches `height`."""
    if up <= down:
        raise ValueError("the snail must climb more than it slips")
    return (height - down - 1) // (up - down) + 1


def is_leap_year(year: int) -> bool:
    """Return whether `year` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def compare(a: int, b: int) -> str:
    """Return '>', '<' or '==' describing a against b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="


def quadrant(x: int, y: int) -> int:
    """Return the quadrant number of the point (x, y)."""
    return _QUADRANT_BY_SIGNS[(y < 0) * 2 + (x < 0)]


def score_grade(score: int) -> str:
    """Return the letter grade for an exam score."""
    if score > 100:
        raise ValueError(f"score out of range: {score}")
    if score == 100:
        return "A"
    if score >= 60:
        return _GRADES[(99 - score) // 10]
    return "F"


def constant_complexity() -> tuple[int, int]:
    """Return the count and polynomial degree of a constant-time algorithm."""
    return 1, 0


def linear_complexity(n: int) -> tuple[int, int]:
    """Return the step count and degree of a single loop over n."""
    return n, 1


def quadratic_complexity(n: int) -> tuple[int, int]:
    """Return the step count and degree of a doubly nested loop over n."""
    return n * n, 2


def midpoint_dots(n: int) -> int:
    """Return the number of dots after n rounds of square midpoint division."""
    line_dots = 2
    for _ in range(n):
        line_dots = line_dots * 2 - 1
    return line_dots * line_dots


def zigzag_fraction(index: int) -> tuple[int, int]:
    """Return the numerator and denominator at `index` in the zigzag order."""
    if index < 1:
        raise ValueError("index must be positive")
    diagonal = 1
    while index > diagonal * (diagonal + 1) // 2:
        diagonal += 1
    offset = index - diagonal * (diagonal - 1) // 2
    if diagonal % 2 == 1:
        return diagonal - (offset - 1), offset
    return offset, diagonal - (offset - 1)


def honeycomb_distance(n: int) -> int:
    """Return how many cells are passed from the centre to cell n."""
    ring = 0
    while n > 1 + 3 * ring * (ring + 1):
        ring += 1
    return ring + 1


def long_type_name(n: int) -> str:
    """Return the type name for an n-byte integer."""
    return "long " * max(_trunc_div(n, 4), 0) + "int"


def hello_world() -> str:
    """Return the greeting."""
    return "Hello World!"


def dog_art() -> str:
    """Return the ASCII dog picture, newline terminated."""
    return _DOG


def multiplication_table(n: int) -> list[str]:
    """Return the lines of the times table for n."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 10)]


def case_sums(pairs: Iterable[tuple[int, int]]) -> list[str]:
    """Return numbered case lines holding each pair's sum."""
    return [f"Case #{t}: {a + b}" for t, (a, b) in enumerate(pairs, start=1)]


def case_equations(pairs: Iterable[tuple[int, int]]) -> list[str]:
    """Return numbered case lines showing each pair's addition."""
    return [
        f"Case #{t}: {a} + {b} = {a + b}" for t, (a, b) in enumerate(pairs, start=1)
    ]