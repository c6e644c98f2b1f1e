"""
Transverse Mercator projection definition and the meridian arc series it relies on.

Method based on Redfearn's formulation as expressed in the GDA technical manual
(http://www.anzlic.org.au/icsm/gdatm/index.html).
"""

__all__ = ['TMProjection', 'foot_point_lat', 'meridian_arc']

from dataclasses import dataclass, field

import numpy as np

from nzgrid.ellipsoid import Ellipsoid
from nzgrid.utils.functions import is_scalar, to_output
from nzgrid.utils.logging import LOGGER


def meridian_arc(ellipsoid: Ellipsoid, lt):
    """
    Length of the meridional arc from the equator to a latitude (Helmert formula).

    The series is truncated after the e^6 terms; there is no iteration.

    Args:
        ellipsoid:
            The reference ellipsoid

        lt:
            Latitude in radians (float or array)

    Returns:
        The signed arc length in meters
    """
    scalar = is_scalar(lt)
    lt = np.asarray(lt, dtype=float)

    a = ellipsoid.a

    e2 = ellipsoid.e2
    e4 = e2 * e2
    e6 = e4 * e2

    A0 = 1 - (e2 / 4.0) - (3.0 * e4 / 64.0) - (5.0 * e6 / 256.0)
    A2 = (3.0 / 8.0) * (e2 + e4 / 4.0 + 15.0 * e6 / 128.0)
    A4 = (15.0 / 256.0) * (e4 + 3.0 * e6 / 4.0)
    A6 = 35.0 * e6 / 3072.0

    result = a * (A0 * lt - A2 * np.sin(2 * lt) + A4 * np.sin(4 * lt) - A6 * np.sin(6 * lt))
    return to_output(result, scalar)


def foot_point_lat(ellipsoid: Ellipsoid, m):
    """
    Calculates the foot point latitude from a meridional arc length.

    This is a fixed-order series in the third flattening rather than an iterative
    inverse of `meridian_arc`, so it is close to, but not exactly, its inverse.

    Args:
        ellipsoid:
            The reference ellipsoid

        m:
            Meridional arc in meters (float or array)

    Returns:
        The foot point latitude in radians
    """
    scalar = is_scalar(m)
    m = np.asarray(m, dtype=float)

    a = ellipsoid.a

    n = ellipsoid.n
    n2 = n * n
    n3 = n2 * n
    n4 = n2 * n2

    g = a * (1.0 - n) * (1.0 - n2) * (1 + 9.0 * n2 / 4.0 + 225.0 * n4 / 64.0)
    sig = m / g

    phio = (
        sig + (3.0 * n / 2.0 - 27.0 * n3 / 32.0) * np.sin(2.0 * sig)
        + (21.0 * n2 / 16.0 - 55.0 * n4 / 32.0) * np.sin(4.0 * sig)
        + (151.0 * n3 / 96.0) * np.sin(6.0 * sig)
        + (1097.0 * n4 / 512.0) * np.sin(8.0 * sig)
    )
    return to_output(phio, scalar)


@dataclass(frozen=True)
class TMProjection:
    """
    The parameters of a Transverse Mercator projection.

    Instances are immutable. The meridional arc at the origin latitude (`om`) is
    computed once on construction and reused by every transform.

    Args:
        ellipsoid:
            The reference ellipsoid

        meridian:
            The central meridian, in radians

        scalef:
            The scale factor on the central meridian

        orglat:
            The origin latitude, in radians

        falsee:
            The false easting, in grid units

        falsen:
            The false northing, in grid units

        utom:
            (Default 1.0) The grid unit to meter conversion
    """
    ellipsoid: Ellipsoid
    meridian: float
    scalef: float
    orglat: float
    falsee: float
    falsen: float
    utom: float = 1.0
    om: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'om', meridian_arc(self.ellipsoid, self.orglat))
        LOGGER.debug(
            'Defined TM projection: cm=%s sf=%s orglat=%s fe=%s fn=%s utom=%s om=%s',
            self.meridian, self.scalef, self.orglat,
            self.falsee, self.falsen, self.utom, self.om,
        )
