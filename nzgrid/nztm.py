"""
Conversion between New Zealand Transverse Mercator 2000 (NZTM) and latitude/longitude
on the New Zealand Geodetic Datum 2000.

The NZTM projection is built once, at import, and is never modified afterwards, so the
functions here are safe to call from any thread. Arguments and results follow the
NZTM convention of putting northing before easting.
"""

__all__ = [
    'NZTM', 'NZTMCoordinate',
    'geodetic_to_grid', 'geodetic_to_nztm', 'grid_to_geodetic', 'nztm_to_geodetic',
]

from typing import NamedTuple, Optional

from nzgrid._const import (
    NZTM_CM, NZTM_FE, NZTM_FN, NZTM_OLAT, NZTM_SF, NZTM_UTOM, RAD2DEG,
)
from nzgrid.ellipsoid import GRS80
from nzgrid.projection import TMProjection
from nzgrid.transform import GeodeticCoordinate, geodetic_to_tm, tm_to_geodetic
from nzgrid.validation import check_geodetic, check_grid, resolve_validation


class NZTMCoordinate(NamedTuple):
    """A NZTM northing/easting pair, in meters"""
    northing: float
    easting: float


NZTM = TMProjection(
    GRS80,
    meridian=NZTM_CM / RAD2DEG,
    scalef=NZTM_SF,
    orglat=NZTM_OLAT / RAD2DEG,
    falsee=NZTM_FE,
    falsen=NZTM_FN,
    utom=NZTM_UTOM,
)


def nztm_to_geodetic(northing, easting, validate: Optional[bool] = None) -> GeodeticCoordinate:
    """
    Convert from NZTM to latitude and longitude.

    Args:
        northing:
            NZTM northing, in meters (float or array)

        easting:
            NZTM easting, in meters (float or array)

        validate:
            (Default None) Raise ValueError on non-finite input. When None, the
            setting from `nzgrid.validation.set_validation` applies.

    Returns:
        GeodeticCoordinate of (latitude, longitude) in radians
    """
    if resolve_validation(validate):
        check_grid(easting, northing)

    return tm_to_geodetic(NZTM, easting, northing)


def geodetic_to_nztm(latitude, longitude, validate: Optional[bool] = None) -> NZTMCoordinate:
    """
    Convert from latitude and longitude to NZTM.

    Args:
        latitude:
            Latitude in radians (float or array)

        longitude:
            Longitude in radians (float or array)

        validate:
            (Default None) Raise ValueError on non-finite input or latitudes at the
            poles. When None, the setting from `nzgrid.validation.set_validation`
            applies.

    Returns:
        NZTMCoordinate of (northing, easting) in meters
    """
    if resolve_validation(validate):
        check_geodetic(latitude, longitude)

    easting, northing = geodetic_to_tm(NZTM, latitude, longitude)
    return NZTMCoordinate(northing, easting)


# Aliases using the generic grid naming
grid_to_geodetic = nztm_to_geodetic
geodetic_to_grid = geodetic_to_nztm
