"""Module for miscellaneous multi-use functions"""

__all__ = ['is_scalar', 'round_half_up', 'to_output']

from typing import Any

import numpy as np


def is_scalar(*values: Any) -> bool:
    """True if every value is a plain number rather than an array"""
    return all(np.ndim(x) == 0 for x in values)


def round_half_up(value: float, precision) -> float:
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


def to_output(value, scalar: bool):
    """Collapses a 0-d numpy result back to a python float"""
    if scalar:
        return float(value)
    return value
