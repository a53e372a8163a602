"""Shortest travel times between coloured rooms of a spaceship.

Rooms of the same colour are joined by free teleports; corridors are one-way.
"""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable, Sequence

COLOR_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
UNREACHABLE = -1


def color_index(color: str) -> int:
    """Return the number of a two-character colour name such as '0a'."""
    if len(color) != 2:
        raise ValueError(f"a colour has two characters: {color!r}")
    high, low = (COLOR_DIGITS.find(ch) for ch in color)
    if high < 0 or low < 0:
        raise ValueError(f"invalid colour: {color!r}")
    return high * len(COLOR_DIGITS) + low + 1


def _shortest(
    corridors: dict[int, dict[int, int]],
    colors: Sequence[int],
    groups: dict[int, list[int]],
    start: int,
    goal: int,
) -> int:
    best = {start: 0}
    heap = [(0, start)]
    done: set[int] = set()
    expanded: set[int] = set()
    while heap:
        distance, room = heapq.heappop(heap)
        if room in done:
            continue
        done.add(room)
        if room == goal:
            return distance
        moves = list(corridors[room].items())
        color = colors[room]
        if color not in expanded:
            expanded.add(color)
            moves.extend((other, 0) for other in groups[color] if other != room)
        for other, cost in moves:
            candidate = distance + cost
            if candidate < best.get(other, candidate + 1):
                best[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return UNREACHABLE


def shortest_times(
    colors: Sequence[str],
    corridors: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Return the least time for each (start, end) query, or -1 if unreachable.

    Rooms are numbered from 1. A later corridor between the same rooms
    replaces an earlier one.
    """
    room_colors = [color_index(color) for color in colors]
    count = len(room_colors)

    def room(number: int) -> int:
        if not 1 <= number <= count:
            raise ValueError(f"room {number} outside 1..{count}")
        return number - 1

    links: dict[int, dict[int, int]] = defaultdict(dict)
    for start, end, time in corridors:
        if time < 0:
            raise ValueError("corridor times must not be negative")
        links[room(start)][room(end)] = time

    groups: dict[int, list[int]] = defaultdict(list)
    for index, color in enumerate(room_colors):
        groups[color].append(index)

    return [
        _shortest(links, room_colors, groups, room(start), room(end))
        for start, end in queries
    ]


def solve(text: str) -> str:
    """Answer every case: rooms' colours, corridors, then queries."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        colors = [next(tokens) for _ in range(int(next(tokens)))]
        corridors = [
            (int(next(tokens)), int(next(tokens)), int(next(tokens)))
            for _ in range(int(next(tokens)))
        ]
        queries = [
            (int(next(tokens)), int(next(tokens)))
            for _ in range(int(next(tokens)))
        ]
        lines.append(f"Case #{case}:")
        lines.extend(str(t) for t in shortest_times(colors, corridors, queries))
    return "".join(line + "\n" for line in lines)