"""Rearranging books: odd prices rise, even prices fall, slots keep parity."""

from __future__ import annotations

from collections.abc import Sequence


def arrange_books(books: Sequence[int]) -> list[int]:
    """Sort odd values ascending and even values descending in their own slots."""
    odds = iter(sorted(b for b in books if b % 2 == 1))
    evens = iter(sorted((b for b in books if b % 2 == 0), reverse=True))
    return [next(odds) if b % 2 == 1 else next(evens) for b in books]


def solve(text: str) -> str:
    """Answer every case of the input: a count followed by that many values."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        count = int(next(tokens))
        books = [int(next(tokens)) for _ in range(count)]
        arranged = " ".join(str(b) for b in arrange_books(books))
        lines.append(f"Case #{case}: {arranged}")
    return "".join(line + "\n" for line in lines)