"""
Optional input validation for the NZTM entry points.

The transforms themselves never raise; left alone, degenerate input simply produces
degraded numbers or NaN. When validation is enabled (per call, or globally through
`set_validation`), clearly invalid input raises ValueError instead, and input outside
the NZTM design zone is reported once through the package logger.
"""

__all__ = [
    'check_geodetic', 'check_grid', 'resolve_validation', 'set_validation',
]

import math
from typing import Optional

import numpy as np

from nzgrid._const import (
    NZTM_EASTING_BOUNDS, NZTM_LAT_BOUNDS, NZTM_LON_BOUNDS, NZTM_NORTHING_BOUNDS,
    RAD2DEG,
)
from nzgrid.utils.logging import warn_once


# Default used when an entry point is called with validate=None
_VALIDATE = False


def set_validation(enabled: bool):
    """
    Set whether the NZTM entry points validate their input by default.

    Args:
        enabled:
            True to raise on invalid input, False to pass it through unchecked
    """
    global _VALIDATE
    _VALIDATE = bool(enabled)


def resolve_validation(validate: Optional[bool]) -> bool:
    """Returns the per-call setting if given, else the global default"""
    if validate is None:
        return _VALIDATE
    return validate


def _within(values, bounds) -> bool:
    return bool(np.all((values >= bounds[0]) & (values <= bounds[1])))


def check_geodetic(lt, ln):
    """
    Validate a latitude/longitude pair (radians).

    Args:
        lt:
            Latitude in radians (float or array)

        ln:
            Longitude in radians (float or array)

    Raises:
        ValueError: if either value is not finite, or the latitude is at or beyond a pole
    """
    lt = np.asarray(lt, dtype=float)
    ln = np.asarray(ln, dtype=float)

    if not (np.all(np.isfinite(lt)) and np.all(np.isfinite(ln))):
        raise ValueError('Latitude and longitude must be finite numbers.')

    if np.any(np.abs(lt) >= math.pi / 2):
        raise ValueError(
            f'Latitude must be strictly between -pi/2 and pi/2 radians, got {lt}'
        )

    lon_deg = np.mod(ln * RAD2DEG, 360.0)
    if not (
        _within(lt * RAD2DEG, NZTM_LAT_BOUNDS) and _within(lon_deg, NZTM_LON_BOUNDS)
    ):
        warn_once(
            'Geodetic coordinates fall outside the NZTM design zone; '
            'projected results may be inaccurate. (this warning will not repeat)'
        )


def check_grid(ce, cn):
    """
    Validate an easting/northing pair (meters).

    Args:
        ce:
            Easting (float or array)

        cn:
            Northing (float or array)

    Raises:
        ValueError: if either value is not finite
    """
    ce = np.asarray(ce, dtype=float)
    cn = np.asarray(cn, dtype=float)

    if not (np.all(np.isfinite(ce)) and np.all(np.isfinite(cn))):
        raise ValueError('Easting and northing must be finite numbers.')

    if not (_within(ce, NZTM_EASTING_BOUNDS) and _within(cn, NZTM_NORTHING_BOUNDS)):
        warn_once(
            'Grid coordinates fall outside the NZTM design zone; '
            'geodetic results may be inaccurate. (this warning will not repeat)'
        )
