import pytest

from geosegments.utils.functions import check_num_points, round_half_up


def test_round_half_up():
    assert round_half_up(0.5, 0) == 1.
    assert round_half_up(2.5, 0) == 3.
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(10007.543398, 2) == 10007.54
    assert round_half_up(-1.25, 1) == -1.2


def test_check_num_points():
    check_num_points(1)
    check_num_points(50)

    with pytest.raises(ValueError, match='num_points must be at least 1, got 0'):
        check_num_points(0)

    with pytest.raises(ValueError, match='got -3'):
        check_num_points(-3)
