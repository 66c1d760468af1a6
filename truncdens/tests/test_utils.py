""" """

import numpy as np

from .. import utils as ut


def test_get_linspace_grid_endpoints():
    xarr = ut.get_linspace_grid(0.5, 3.5, 101)
    assert xarr.shape == (101,)
    assert np.allclose(xarr[0], 0.5)
    assert np.allclose(xarr[-1], 3.5)
    assert np.allclose(np.diff(xarr), 0.03, atol=1e-5)


def test_trapezoid_integral_is_exact_for_linear_functions():
    xarr = np.linspace(0, 2, 11)
    yarr = 3 * xarr + 1
    assert np.allclose(ut.trapezoid_integral(xarr, yarr), 8.0, rtol=1e-5)


def test_trapezoid_integral_of_quadratic_converges():
    xarr = np.linspace(0, 1, 2_000)
    assert np.allclose(ut.trapezoid_integral(xarr, xarr**2), 1 / 3, atol=1e-5)
