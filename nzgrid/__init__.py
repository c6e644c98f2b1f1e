from nzgrid._version import __version__  # noqa: F401
from nzgrid.utils.logging import LOGGER
from nzgrid.ellipsoid import Ellipsoid, GRS80
from nzgrid.projection import TMProjection, foot_point_lat, meridian_arc
from nzgrid.transform import GeodeticCoordinate, GridCoordinate, geodetic_to_tm, tm_to_geodetic
from nzgrid.nztm import (
    NZTM, NZTMCoordinate,
    geodetic_to_grid, geodetic_to_nztm, grid_to_geodetic, nztm_to_geodetic,
)
from nzgrid.coordinates import Coordinate
from nzgrid.validation import set_validation


__all__ = [
    'Coordinate',
    'Ellipsoid',
    'GeodeticCoordinate',
    'GridCoordinate',
    'GRS80',
    'NZTM',
    'NZTMCoordinate',
    'TMProjection',
    'foot_point_lat',
    'geodetic_to_grid',
    'geodetic_to_nztm',
    'geodetic_to_tm',
    'grid_to_geodetic',
    'meridian_arc',
    'nztm_to_geodetic',
    'set_validation',
    'tm_to_geodetic',
    'LOGGER',
]
