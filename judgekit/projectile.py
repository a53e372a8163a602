"""Launch angle needed to throw a projectile a given distance."""

from __future__ import annotations

import math

GRAVITY = 9.8
FALLBACK_ANGLE = 45.0


def launch_angle(speed: float, distance: float) -> float:
    """Return the launch angle in degrees that lands at `distance`.

    When the distance cannot be reached, 45 degrees is returned.
    """
    if speed == 0:
        return FALLBACK_ANGLE
    ratio = GRAVITY * distance / speed / speed
    if not -1.0 <= ratio <= 1.0:
        return FALLBACK_ANGLE
    return math.degrees(math.asin(ratio)) / 2


def solve(text: str) -> str:
    """Answer every 'speed distance' case of the input text."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        speed, distance = int(next(tokens)), int(next(tokens))
        lines.append(f"Case #{case}: {launch_angle(speed, distance):.7f}")
    return "".join(line + "\n" for line in lines)