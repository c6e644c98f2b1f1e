import math

import numpy as np
import pytest

import nzgrid.utils.logging
from nzgrid import set_validation
from nzgrid import validation
from nzgrid.nztm import geodetic_to_nztm, nztm_to_geodetic
from nzgrid.validation import check_geodetic, check_grid, resolve_validation


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    monkeypatch.setattr(validation, '_VALIDATE', False)
    monkeypatch.setattr(nzgrid.utils.logging, '_WARNINGS', set())


def test_check_geodetic():
    check_geodetic(math.radians(-41.), math.radians(174.))
    check_geodetic(np.radians([-41., -37.]), np.radians([174., 175.]))

    with pytest.raises(ValueError):
        check_geodetic(math.pi / 2, math.radians(174.))

    with pytest.raises(ValueError):
        check_geodetic(-math.pi / 2, math.radians(174.))

    with pytest.raises(ValueError):
        check_geodetic(np.radians([-41., -91.]), np.radians([174., 174.]))

    with pytest.raises(ValueError):
        check_geodetic(float('nan'), math.radians(174.))

    with pytest.raises(ValueError):
        check_geodetic(math.radians(-41.), float('inf'))


def test_check_geodetic_outside_zone(caplog):
    check_geodetic(math.radians(-41.), math.radians(174.))
    assert 'outside the NZTM design zone' not in caplog.text

    # Chatham Islands sit east of the antimeridian but inside the zone
    check_geodetic(math.radians(-44.), math.radians(-176.5))
    assert 'outside the NZTM design zone' not in caplog.text

    check_geodetic(math.radians(51.5), math.radians(-0.1))
    assert 'outside the NZTM design zone' in caplog.text


def test_check_grid(caplog):
    check_grid(1576041.15, 6188574.24)
    check_grid(np.array([1576041.15, 1307103.22]), np.array([6188574.24, 4826464.86]))
    assert caplog.text == ''

    with pytest.raises(ValueError):
        check_grid(float('nan'), 6188574.24)

    with pytest.raises(ValueError):
        check_grid(np.array([1576041.15, np.inf]), np.array([6188574.24, 4826464.86]))

    check_grid(500000., 6188574.24)
    assert 'outside the NZTM design zone' in caplog.text


def test_outside_zone_warns_once(caplog):
    check_grid(0., 0.)
    check_grid(1., 1.)
    assert caplog.text.count('outside the NZTM design zone') == 1


def test_resolve_validation():
    assert resolve_validation(None) is False
    assert resolve_validation(True) is True

    set_validation(True)
    assert resolve_validation(None) is True
    assert resolve_validation(False) is False


def test_set_validation():
    # Off by default: degenerate input passes through
    lt, _ = nztm_to_geodetic(float('nan'), 1600000.)
    assert math.isnan(lt)

    set_validation(True)
    with pytest.raises(ValueError):
        nztm_to_geodetic(float('nan'), 1600000.)

    with pytest.raises(ValueError):
        geodetic_to_nztm(math.pi / 2, 0.)

    # An explicit argument overrides the global setting
    lt, _ = nztm_to_geodetic(float('nan'), 1600000., validate=False)
    assert math.isnan(lt)
