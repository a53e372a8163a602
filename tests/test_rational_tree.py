from math import gcd

import pytest

from judgekit.rational_tree import node_index, node_value, solve


def test_root():
    assert node_value(1) == (1, 1)
    assert node_index(1, 1) == 1


def test_left_child():
    assert node_value(2) == (1, 2)


@pytest.mark.parametrize("n", list(range(1, 200)) + [2**40 + 12345, 2**63 - 1])
def test_round_trip_from_index(n):
    p, q = node_value(n)
    assert gcd(p, q) == 1
    assert node_index(p, q) == n


@pytest.mark.parametrize("p,q", [(1, 10**6), (10**6, 1), (355, 113), (13, 21)])
def test_round_trip_from_fraction(p, q):
    assert node_value(node_index(p, q)) == (p, q)


def test_children_relation():
    for n in range(1, 50):
        p, q = node_value(n)
        assert node_value(2 * n) == (p, p + q)
        assert node_value(2 * n + 1) == (p + q, q)


def test_errors():
    with pytest.raises(ValueError):
        node_index(2, 2)
    with pytest.raises(ValueError):
        node_index(0, 1)
    with pytest.raises(ValueError):
        node_value(0)
    with pytest.raises(ValueError):
        solve("1\n3 1\n")


def test_solve():
    assert solve("2\n1 2\n2 1 2\n") == "Case #1: 1 2\nCase #2: 2\n"