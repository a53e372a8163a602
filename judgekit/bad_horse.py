"""Deciding whether troublesome pairs can be split into two groups."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable


def can_split(pairs: Iterable[tuple[str, str]]) -> bool:
    """Return whether members can form two groups with no pair in one group.

    A pair naming the same member twice can never be split.
    """
    neighbours: dict[str, set[str]] = defaultdict(set)
    for first, second in pairs:
        neighbours[first].add(second)
        neighbours[second].add(first)

    side: dict[str, bool] = {}
    for root in neighbours:
        if root in side:
            continue
        side[root] = False
        queue = deque([root])
        while queue:
            member = queue.popleft()
            for other in neighbours[member]:
                if other not in side:
                    side[other] = not side[member]
                    queue.append(other)
                elif side[other] == side[member]:
                    return False
    return True


def solve(text: str) -> str:
    """Answer every case: a pair count followed by that many name pairs."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        count = int(next(tokens))
        pairs = [(next(tokens), next(tokens)) for _ in range(count)]
        answer = "Yes" if can_split(pairs) else "No"
        lines.append(f"Case #{case}: {answer}")
    return "".join(line + "\n" for line in lines)