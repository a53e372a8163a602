from collections import Counter

import pytest

from judgekit.bookshelf import arrange_books, solve


def test_example():
    assert arrange_books([5, 2, 4, 3, 1]) == [1, 4, 2, 3, 5]


@pytest.mark.parametrize(
    "books",
    [[], [7], [-5, -12, 0, 3, -1, 8, 9, -4], [2, 4, 6], [9, 7, 5, 3], [10, -3, 10, -3]],
)
def test_invariants(books):
    result = arrange_books(books)
    assert Counter(result) == Counter(books)
    assert [b % 2 for b in result] == [b % 2 for b in books]
    odds = [b for b in result if b % 2 == 1]
    evens = [b for b in result if b % 2 == 0]
    assert odds == sorted(odds)
    assert evens == sorted(evens, reverse=True)


def test_solve():
    assert solve("2\n1\n7\n2\n4 6\n") == "Case #1: 7\nCase #2: 6 4\n"