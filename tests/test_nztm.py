import math

import numpy as np
import pytest
from pytest import approx

from nzgrid._const import NZTM_CM, RAD2DEG
from nzgrid.ellipsoid import GRS80
from nzgrid.nztm import (
    NZTM, NZTMCoordinate, geodetic_to_grid, geodetic_to_nztm, grid_to_geodetic,
    nztm_to_geodetic,
)
from nzgrid.transform import GeodeticCoordinate, geodetic_to_tm

from tests.functions import assert_pairs_equal


# (easting, northing) pairs spread across the country
NZTM_POINTS = [
    (1576041.15, 6188574.24),
    (1576542.01, 5515331.05),
    (1307103.22, 4826464.86),
    (1748735.50, 5428007.60),
    (1757206.00, 5920456.00),
    (1570672.00, 5180026.00),
    (1866500.00, 5670000.00),
]


def test_nztm_definition():
    assert NZTM.ellipsoid == GRS80
    assert NZTM.meridian == NZTM_CM / RAD2DEG
    assert NZTM.scalef == 0.9996
    assert NZTM.orglat == 0.
    assert NZTM.falsee == 1600000.
    assert NZTM.falsen == 10000000.
    assert NZTM.utom == 1.
    assert NZTM.om == 0.


def test_nztm_origin():
    lt, ln = nztm_to_geodetic(10000000., 1600000.)
    assert lt == approx(0., abs=1e-9)
    assert ln == approx(math.radians(173.), abs=1e-9)

    # Exactly the configured constants
    assert lt == NZTM.orglat
    assert ln == NZTM.meridian

    assert geodetic_to_nztm(0., NZTM.meridian) == (10000000., 1600000.)


def test_north_first_order():
    result = geodetic_to_nztm(math.radians(-41.), math.radians(174.))
    assert isinstance(result, NZTMCoordinate)
    assert result.northing == result[0]
    assert result.easting == result[1]

    # Northing is far larger than easting throughout New Zealand
    assert result.northing > 5_000_000 > result.easting > 1_600_000

    geodetic = nztm_to_geodetic(result.northing, result.easting)
    assert isinstance(geodetic, GeodeticCoordinate)

    easting, northing = geodetic_to_tm(NZTM, *geodetic)
    assert_pairs_equal((northing, easting), result)


def test_aliases():
    assert grid_to_geodetic is nztm_to_geodetic
    assert geodetic_to_grid is geodetic_to_nztm


def test_round_trip():
    for easting, northing in NZTM_POINTS:
        lt, ln = nztm_to_geodetic(northing, easting)
        n1, e1 = geodetic_to_nztm(lt, ln)
        assert_pairs_equal((e1, n1), (easting, northing), abs_tol=1e-3)


def test_round_trip_array():
    eastings = np.array([x[0] for x in NZTM_POINTS])
    northings = np.array([x[1] for x in NZTM_POINTS])

    lats, lons = nztm_to_geodetic(northings, eastings)
    n1, e1 = geodetic_to_nztm(lats, lons)
    np.testing.assert_allclose(e1, eastings, atol=1e-3)
    np.testing.assert_allclose(n1, northings, atol=1e-3)


def test_recovered_positions():
    # Wellington, roughly
    lt, ln = nztm_to_geodetic(5428007.6, 1748735.5)
    assert math.degrees(lt) == approx(-41.2865, abs=1e-2)
    assert math.degrees(ln) == approx(174.7762, abs=1e-2)


def test_north_step_scale():
    lt, ln = nztm_to_geodetic(10000001., 1600000.)
    rho = GRS80.a * (1.0 - GRS80.e2)
    assert lt == approx(1.0 / (NZTM.scalef * rho), rel=1e-7)
    assert ln == NZTM.meridian


def test_longitude_wraparound():
    lt, ln = math.radians(-43.5), math.radians(172.6)
    expected = geodetic_to_nztm(lt, ln)
    for turns in (-2, -1, 1, 3):
        assert_pairs_equal(
            geodetic_to_nztm(lt, ln + turns * 2 * math.pi),
            expected,
            abs_tol=1e-6
        )


def test_validate_flag():
    with pytest.raises(ValueError):
        geodetic_to_nztm(math.pi / 2, math.radians(173.), validate=True)

    with pytest.raises(ValueError):
        nztm_to_geodetic(float('nan'), 1600000., validate=True)

    # Unchecked calls degrade instead of raising
    lt, ln = nztm_to_geodetic(float('nan'), 1600000.)
    assert math.isnan(lt)


def test_matches_pyproj():
    pyproj = pytest.importorskip('pyproj')
    transformer = pyproj.Transformer.from_crs('EPSG:4167', 'EPSG:2193', always_xy=True)

    for lat, lon in [
        (-41.2865, 174.7762),
        (-36.8485, 174.7633),
        (-43.5321, 172.6362),
        (-45.8788, 170.5028),
    ]:
        expected_e, expected_n = transformer.transform(lon, lat)
        northing, easting = geodetic_to_nztm(math.radians(lat), math.radians(lon))
        assert easting == approx(expected_e, abs=1e-2)
        assert northing == approx(expected_n, abs=1e-2)
