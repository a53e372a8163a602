import pytest

from judgekit.spaceship import color_index, shortest_times, solve


def test_lowest_colour_is_one():
    assert color_index("00") == 1


def test_colour_numbers_are_distinct():
    names = ["00", "0a", "a0", "zz", "z0", "0z", "9k"]
    assert len({color_index(name) for name in names}) == len(names)


@pytest.mark.parametrize("bad", ["A0", "abc", "a", "-1"])
def test_invalid_colour_is_rejected(bad):
    with pytest.raises(ValueError):
        color_index(bad)


def test_same_colour_teleports_free():
    assert shortest_times(["gr", "gr"], [], [(1, 2)]) == [0]


def test_unconnected_rooms_are_unreachable():
    assert shortest_times(["aa", "bb"], [], [(1, 2)]) == [-1]


def test_corridors_are_one_way():
    assert shortest_times(["aa", "bb"], [(1, 2, 7)], [(1, 2), (2, 1)]) == [7, -1]


def test_later_corridor_replaces_earlier():
    assert shortest_times(["aa", "bb"], [(1, 2, 9), (1, 2, 2)], [(1, 2)]) == [2]


def test_teleport_after_corridor():
    colors = ["aa", "bb", "bb"]
    assert shortest_times(colors, [(1, 2, 4)], [(1, 3)]) == [4]


def test_room_to_itself_takes_no_time():
    assert shortest_times(["aa", "bb"], [(1, 2, 3)], [(2, 2)]) == [0]


def test_detour_beats_long_corridor():
    colors = ["aa", "bb", "cc"]
    corridors = [(1, 3, 10), (1, 2, 1), (2, 3, 1)]
    d13, d12, d23 = shortest_times(colors, corridors, [(1, 3), (1, 2), (2, 3)])
    assert d13 == d12 + d23
    assert d13 < 10


def test_unknown_room_is_rejected():
    with pytest.raises(ValueError):
        shortest_times(["aa"], [(1, 2, 1)], [])


def test_solve_formats_cases():
    text = "1\n2\naa bb\n1\n1 2 7\n2\n1 2\n2 1\n"
    assert solve(text) == "Case #1:\n7\n-1\n"