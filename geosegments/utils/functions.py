"""Module for miscellaneous multi-use functions"""

__all__ = ['check_num_points', 'round_half_up']


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def check_num_points(num_points: int) -> None:
    """Raises ValueError unless a path is to be split into at least one step"""
    if num_points < 1:
        raise ValueError(f'num_points must be at least 1, got {num_points}')
