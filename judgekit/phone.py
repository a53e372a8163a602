"""Reading phone numbers aloud, grouping repeated digits."""

from __future__ import annotations

from itertools import groupby

DIGIT_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)
REPEAT_WORDS = {
    2: "double",
    3: "triple",
    4: "quadruple",
    5: "quintuple",
    6: "sextuple",
    7: "septuple",
    8: "octuple",
    9: "nonuple",
    10: "decuple",
}


def _parse_layout(layout: str) -> list[int]:
    sizes = [int(part) for part in layout.split("-") if part]
    if any(size < 1 for size in sizes):
        raise ValueError(f"group sizes must be positive: {layout!r}")
    return sizes


def _read_run(digit: str, length: int) -> list[str]:
    word = DIGIT_WORDS[int(digit)]
    if length in REPEAT_WORDS:
        return [REPEAT_WORDS[length], word]
    if length > max(REPEAT_WORDS):
        return [word] * length
    return [word]


def read_number(number: str, layout: str) -> str:
    """Return the spoken form of `number` split into groups such as '3-4-4'."""
    if not all("0" <= ch <= "9" for ch in number):
        raise ValueError(f"not a digit string: {number!r}")
    sizes = _parse_layout(layout)
    if sum(sizes) > len(number):
        raise ValueError("layout is longer than the number")
    words: list[str] = []
    start = 0
    for size in sizes:
        for digit, run in groupby(number[start:start + size]):
            words.extend(_read_run(digit, sum(1 for _ in run)))
        start += size
    return " ".join(words)


def solve(text: str) -> str:
    """Answer every 'number layout' case of the input text."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        number, layout = next(tokens), next(tokens)
        lines.append(f"Case #{case}: {read_number(number, layout)}")
    return "".join(line + "\n" for line in lines)