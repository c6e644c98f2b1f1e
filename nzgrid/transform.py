"""
Conversion between geodetic coordinates and Transverse Mercator grid coordinates.

Method based on Redfearn's formulation as expressed in the GDA technical manual
(http://www.anzlic.org.au/icsm/gdatm/index.html). Loosely based on FORTRAN source
code by J.Hannah and A.Broadhurst.

Both transforms accept floats or numpy arrays. Neither validates its input: near the
poles, or far outside the projection's zone, the series degrade and may return NaN.
"""

__all__ = [
    'GeodeticCoordinate', 'GridCoordinate',
    'geodetic_to_tm', 'tm_to_geodetic', 'wrap_longitude',
]

from typing import NamedTuple

import numpy as np

from nzgrid._const import PI, TWOPI
from nzgrid.projection import TMProjection, foot_point_lat, meridian_arc
from nzgrid.utils.functions import is_scalar, to_output


class GeodeticCoordinate(NamedTuple):
    """A latitude/longitude pair, in radians"""
    latitude: float
    longitude: float


class GridCoordinate(NamedTuple):
    """A Transverse Mercator easting/northing pair, in grid units"""
    easting: float
    northing: float


def wrap_longitude(dlon):
    """
    Brings a longitude difference into the range [-pi, pi] by whole turns.

    Values already in range are returned unchanged.

    Args:
        dlon:
            Longitude difference in radians (float or array)

    Returns:
        The wrapped longitude difference, as a numpy value
    """
    dlon = np.asarray(dlon, dtype=float)
    turns = np.where(
        dlon > PI,
        np.ceil((dlon - PI) / TWOPI),
        np.where(dlon < -PI, -np.ceil((-PI - dlon) / TWOPI), 0.0)
    )
    return dlon - turns * TWOPI


def tm_to_geodetic(tm: TMProjection, ce, cn) -> GeodeticCoordinate:
    """
    Convert from Transverse Mercator to latitude and longitude.

    Args:
        tm:
            The projection

        ce:
            Easting, in grid units

        cn:
            Northing, in grid units

    Returns:
        GeodeticCoordinate of (latitude, longitude) in radians
    """
    scalar = is_scalar(ce, cn)
    ce = np.asarray(ce, dtype=float)
    cn = np.asarray(cn, dtype=float)

    fn = tm.falsen
    fe = tm.falsee
    sf = tm.scalef
    e2 = tm.ellipsoid.e2
    a = tm.ellipsoid.a
    cm = tm.meridian
    om = tm.om
    utom = tm.utom

    with np.errstate(all='ignore'):
        cn1 = (cn - fn) * utom / sf + om
        fphi = foot_point_lat(tm.ellipsoid, cn1)
        slt = np.sin(fphi)
        clt = np.cos(fphi)

        eslt = (1.0 - e2 * slt * slt)
        eta = a / np.sqrt(eslt)
        rho = eta * (1.0 - e2) / eslt
        psi = eta / rho

        E = (ce - fe) * utom
        x = E / (eta * sf)
        x2 = x * x

        t = slt / clt
        t2 = t * t
        t4 = t2 * t2

        trm1 = 1.0 / 2.0

        trm2 = ((-4.0 * psi + 9.0 * (1 - t2)) * psi + 12.0 * t2) / 24.0

        trm3 = ((((8.0 * (11.0 - 24.0 * t2) * psi
                   - 12.0 * (21.0 - 71.0 * t2)) * psi
                  + 15.0 * ((15.0 * t2 - 98.0) * t2 + 15)) * psi
                 + 180.0 * ((-3.0 * t2 + 5.0) * t2)) * psi + 360.0 * t4) / 720.0

        trm4 = (((1575.0 * t2 + 4095.0) * t2 + 3633.0) * t2 + 1385.0) / 40320.0

        lt = fphi + (t * x * E / (sf * rho)) * (((trm4 * x2 - trm3) * x2 + trm2) * x2 - trm1)

        trm1 = 1.0

        trm2 = (psi + 2.0 * t2) / 6.0

        trm3 = (((-4.0 * (1.0 - 6.0 * t2) * psi
                  + (9.0 - 68.0 * t2)) * psi
                 + 72.0 * t2) * psi
                + 24.0 * t4) / 120.0

        trm4 = (((720.0 * t2 + 1320.0) * t2 + 662.0) * t2 + 61.0) / 5040.0

        ln = cm - (x / clt) * (((trm4 * x2 - trm3) * x2 + trm2) * x2 - trm1)

    return GeodeticCoordinate(to_output(lt, scalar), to_output(ln, scalar))


def geodetic_to_tm(tm: TMProjection, lt, ln) -> GridCoordinate:
    """
    Convert from latitude and longitude to Transverse Mercator.

    Args:
        tm:
            The projection

        lt:
            Latitude, in radians

        ln:
            Longitude, in radians. Any number of whole turns away from the central
            meridian is accepted.

    Returns:
        GridCoordinate of (easting, northing) in grid units
    """
    scalar = is_scalar(lt, ln)
    lt = np.asarray(lt, dtype=float)
    ln = np.asarray(ln, dtype=float)

    fn = tm.falsen
    fe = tm.falsee
    sf = tm.scalef
    e2 = tm.ellipsoid.e2
    a = tm.ellipsoid.a
    cm = tm.meridian
    om = tm.om
    utom = tm.utom

    with np.errstate(all='ignore'):
        dlon = wrap_longitude(ln - cm)

        m = meridian_arc(tm.ellipsoid, lt)

        slt = np.sin(lt)

        eslt = (1.0 - e2 * slt * slt)
        eta = a / np.sqrt(eslt)
        rho = eta * (1.0 - e2) / eslt
        psi = eta / rho

        clt = np.cos(lt)
        w = dlon

        wc = clt * w
        wc2 = wc * wc

        t = slt / clt
        t2 = t * t
        t4 = t2 * t2
        t6 = t2 * t4

        trm1 = (psi - t2) / 6.0

        trm2 = (((4.0 * (1.0 - 6.0 * t2) * psi
                  + (1.0 + 8.0 * t2)) * psi
                 - 2.0 * t2) * psi + t4) / 120.0

        trm3 = (61 - 479.0 * t2 + 179.0 * t4 - t6) / 5040.0

        gce = (sf * eta * dlon * clt) * (((trm3 * wc2 + trm2) * wc2 + trm1) * wc2 + 1.0)
        ce = gce / utom + fe

        trm1 = 1.0 / 2.0

        trm2 = ((4.0 * psi + 1) * psi - t2) / 24.0

        trm3 = ((((8.0 * (11.0 - 24.0 * t2) * psi
                   - 28.0 * (1.0 - 6.0 * t2)) * psi
                  + (1.0 - 32.0 * t2)) * psi
                 - 2.0 * t2) * psi
                + t4) / 720.0

        trm4 = (1385.0 - 3111.0 * t2 + 543.0 * t4 - t6) / 40320.0

        gcn = (eta * t) * ((((trm4 * wc2 + trm3) * wc2 + trm2) * wc2 + trm1) * wc2)
        cn = (gcn + m - om) * sf / utom + fn

    return GridCoordinate(to_output(ce, scalar), to_output(cn, scalar))
