import math

import pytest

from judgekit.projectile import GRAVITY, launch_angle, solve


def test_full_range_is_forty_five():
    assert launch_angle(98, 980) == pytest.approx(45.0)


def test_unreachable_gives_forty_five():
    assert launch_angle(1, 1000) == 45.0
    assert launch_angle(0, 10) == 45.0


def test_zero_distance():
    assert launch_angle(10, 0) == 0.0


@pytest.mark.parametrize("speed,distance", [(50, 100), (30, 50), (100, 1)])
def test_angle_lands_at_distance(speed, distance):
    angle = launch_angle(speed, distance)
    assert 0 <= angle <= 45
    reach = speed * speed * math.sin(math.radians(2 * angle)) / GRAVITY
    assert reach == pytest.approx(distance)


def test_solve_format():
    assert solve("2\n98 980\n1 1000\n") == (
        "Case #1: 45.0000000\nCase #2: 45.0000000\n"
    )