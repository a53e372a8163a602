"""Exercises over words, characters and printed text shapes."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import zip_longest
from string import ascii_lowercase, ascii_uppercase

SURPRISE_SUFFIX = "??!"
_WORD_SEPARATORS = re.compile(r"[ \n]+")
_CROATIAN_LETTER = re.compile(r"dz=|c=|c-|d-|lj|nj|s=|z=|.", re.DOTALL)
_GRADE_POINTS = {"A": 4.0, "B": 3.0, "C": 2.0, "D": 1.0}
_PASS_MARK = "P"


def read_vertically(lines: Iterable[str]) -> str:
    """Read the lines column by column, skipping positions a line lacks."""
    return "".join(
        "".join(column) for column in zip_longest(*lines, fillvalue="")
    )


def first_positions(word: str) -> list[int]:
    """Return, for each letter a..z, its first index in `word`, or -1."""
    positions = dict.fromkeys(ascii_lowercase, -1)
    for index, ch in enumerate(word):
        if ch not in positions:
            raise ValueError(f"not a lowercase letter: {ch!r}")
        if positions[ch] == -1:
            positions[ch] = index
    return list(positions.values())


def surprise(name: str) -> str:
    """Return the name followed by an astonished '??!'."""
    return name + SURPRISE_SUFFIX


def is_palindrome(text: str) -> bool:
    """Return whether `text` reads the same backwards."""
    return text == text[::-1]


def char_code(ch: str) -> int:
    """Return the code of a single character."""
    if len(ch) != 1:
        raise ValueError("exactly one character is needed")
    return ord(ch)


def digit_sum(digits: str, count: int) -> int:
    """Return the sum of the first `count` digits of `digits`."""
    if not 0 <= count <= len(digits):
        raise ValueError(f"cannot take {count} digits from {len(digits)}")
    head = digits[:count]
    if not all("0" <= ch <= "9" for ch in head):
        raise ValueError(f"not a digit string: {head!r}")
    return sum(int(ch) for ch in head)


def count_words(text: str) -> int:
    """Return the number of words separated by spaces or newlines."""
    return sum(1 for word in _WORD_SEPARATORS.split(text) if word)


def most_common_letter(word: str) -> str:
    """Return the most frequent letter in upper case, or '?' on a tie."""
    counts = Counter(ch.upper() for ch in word if ch.isascii() and ch.isalpha())
    best = max((counts[letter] for letter in ascii_uppercase), default=0)
    winners = [letter for letter in ascii_uppercase if counts[letter] == best]
    return winners[0] if len(winners) == 1 else "?"


def is_group_word(word: str) -> bool:
    """Return whether every letter's occurrences in `word` are contiguous."""
    seen: set[str] = set()
    previous = None
    for ch in word:
        if ch != previous:
            if ch in seen:
                return False
            seen.add(ch)
            previous = ch
    return True


def count_group_words(words: Iterable[str]) -> int:
    """Return how many of `words` are group words."""
    return sum(1 for word in words if is_group_word(word))


def repeat_chars(text: str, times: int) -> str:
    """Return `text` with every character repeated `times` times."""
    return "".join(ch * times for ch in text)


def text_length(text: str) -> int:
    """Return the number of characters in `text`."""
    return len(text)


def char_at(text: str, position: int) -> str:
    """Return the character at 1-based `position`."""
    if not 1 <= position <= len(text):
        raise IndexError(f"position {position} outside 1..{len(text)}")
    return text[position - 1]


def reversed_max(a: str | int, b: str | int) -> int:
    """Return the larger of the two numbers after reading each backwards."""
    return max(int(str(a)[::-1]), int(str(b)[::-1]))


def croatian_length(word: str) -> int:
    """Return how many Croatian letters `word` spells."""
    return len(_CROATIAN_LETTER.findall(word))


def _dial_seconds(letter: str) -> int:
    if not ("A" <= letter <= "Z"):
        raise ValueError(f"not an uppercase letter: {letter!r}")
    if letter <= "O":
        return 3 + (ord(letter) - ord("A")) // 3
    if letter <= "S":
        return 8
    if letter <= "V":
        return 9
    return 10


def dial_time(word: str) -> int:
    """Return the seconds needed to dial `word` on a rotary phone."""
    return sum(_dial_seconds(letter) for letter in word)


def first_last(text: str) -> str:
    """Return the first and last characters of `text`."""
    if not text:
        raise ValueError("empty text")
    return text[0] + text[-1]


def left_triangle(n: int) -> list[str]:
    """Return the lines of a left-aligned star triangle of height n."""
    return ["*" * i for i in range(1, n + 1)]


def right_triangle(n: int) -> list[str]:
    """Return the lines of a right-aligned star triangle of height n."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]


def diamond(n: int) -> list[str]:
    """Return the lines of a star diamond whose widest row is 2n-1."""
    top = [" " * (n - 1 - i) + "*" * (2 * i + 1) for i in range(n)]
    bottom = [" " * (n - i) + "*" * (2 * i - 1) for i in range(n - 1, 0, -1)]
    return top + bottom


def letter_grade_points(grade: str) -> float:
    """Return the grade points of a letter grade such as 'A+' or 'C0'."""
    points = _GRADE_POINTS.get(grade[:1], 0.0)
    if grade[1:2] == "+":
        points += 0.5
    return points


def gpa(lines: Iterable[str] | str) -> float:
    """Return the credit-weighted grade average of 'name credits grade' lines.

    Courses graded 'P' count toward neither the points nor the credits.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    total = 0.0
    credits_total = 0.0
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 3:
            raise ValueError(f"malformed course line: {line!r}")
        _, credits_text, grade = fields[:3]
        if grade.startswith(_PASS_MARK):
            continue
        credits = float(credits_text)
        total += credits * letter_grade_points(grade)
        credits_total += credits
    if credits_total == 0:
        raise ValueError("no graded credits")
    return total / credits_total