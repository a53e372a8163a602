"""Positions and values in the binary tree of all positive rationals."""

from __future__ import annotations

from math import gcd


def node_value(n: int) -> tuple[int, int]:
    """Return the fraction (p, q) stored at node n, numbered breadth first."""
    if n < 1:
        raise ValueError("node numbers start at 1")
    p, q = 1, 1
    for bit in bin(n)[3:]:
        if bit == "0":
            q = p + q
        else:
            p = p + q
    return p, q


def node_index(p: int, q: int) -> int:
    """Return the node number at which the fraction p/q is stored."""
    if p < 1 or q < 1:
        raise ValueError("p and q must be positive")
    if gcd(p, q) != 1:
        raise ValueError(f"{p}/{q} is not in lowest terms")
    index = 0
    position = 0
    while (p, q) != (1, 1):
        if p > q:
            steps = (p - 1) // q
            p -= steps * q
            index |= ((1 << steps) - 1) << position
        else:
            steps = (q - 1) // p
            q -= steps * p
        position += steps
    return index | (1 << position)


def solve(text: str) -> str:
    """Answer every case: '1 n' asks for a value, '2 p q' for an index."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        kind = int(next(tokens))
        if kind == 1:
            p, q = node_value(int(next(tokens)))
            lines.append(f"Case #{case}: {p} {q}")
        elif kind == 2:
            p, q = int(next(tokens)), int(next(tokens))
            lines.append(f"Case #{case}: {node_index(p, q)}")
        else:
            raise ValueError(f"unknown question kind: {kind}")
    return "".join(line + "\n" for line in lines)