"""Counting the cards that must be moved to sort a hand by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_NAME_WORDS = 2


def _card_key(name: str) -> tuple[str, str]:
    words = [word for word in name.split(" ") if word]
    if len(words) > MAX_NAME_WORDS:
        raise ValueError(f"a name holds at most {MAX_NAME_WORDS} words: {name!r}")
    words += [""] * (MAX_NAME_WORDS - len(words))
    return words[0], words[1]


def sorting_cost(names: Iterable[str]) -> int:
    """Return how many cards must be moved to put the names in order.

    A card costs nothing when it sorts strictly after every card before it.
    """
    keys = [_card_key(name) for name in names]
    if not keys:
        return 0
    best = keys[0]
    cost = 0
    for key in keys[1:]:
        if best < key:
            best = key
        else:
            cost += 1
    return cost


def _next_count(lines: Iterator[str]) -> int:
    for line in lines:
        if line.strip():
            return int(line.split()[0])
    raise ValueError("input ended before a count")


def solve(text: str) -> str:
    """Answer every case: a card count, then one name per line."""
    lines = iter(text.splitlines())
    cases = _next_count(lines)
    output = []
    for case in range(1, cases + 1):
        count = _next_count(lines)
        names = []
        for _ in range(count):
            try:
                names.append(next(lines))
            except StopIteration:
                raise ValueError("input ended before all names were read") from None
        output.append(f"Case #{case}: {sorting_cost(names)}")
    return "".join(line + "\n" for line in output)