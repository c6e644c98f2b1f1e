from pytest import approx

from nzgrid import Coordinate


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)
    except AssertionError as e:
        print(c1.longitude, c1.latitude)
        print(c2.longitude, c2.latitude)
        raise e


def assert_pairs_equal(p1, p2, abs_tol=1e-3):
    """
    Asserts that two coordinate pairs (of any order) are equal within a tolerance.
    The default of 1e-3 is a millimetre for NZTM.
    """
    try:
        assert p1[0] == approx(p2[0], abs=abs_tol)
        assert p1[1] == approx(p2[1], abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e
