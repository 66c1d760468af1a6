# flake8: noqa: E402
"""Density of a normal distribution conditioned on exceeding a threshold.

Plotting the unconditional normal pdf on top of a density histogram of a
truncated sample understates the density everywhere on the truncated support.
The functions in this module divide the pdf by the probability mass of the
support so that the curve integrates to unity over the range of the sample.
"""

from jax import config

config.update("jax_enable_x64", True)

import operator
from collections import namedtuple
from functools import partial

import numpy as np
from jax import jit as jjit
from jax import numpy as jnp
from jax.scipy import stats as jstats

from .defaults import (
    DEFAULT_GRID_SIZE,
    NORM_SAMPLE_RANGE,
    NORM_SUPPORT,
    NORMALIZATIONS,
    NormalParams,
)
from .exceptions import InvalidInputError
from .utils import get_linspace_grid, trapezoid_integral

DensityGrid = namedtuple("DensityGrid", ("x", "density"))


def estimate_normal_params(sample):
    """Estimate the mean and standard deviation of a sample

    Parameters
    ----------
    sample : array, shape (n, )
        Requires n >= 2 finite values that are not all equal

    Returns
    -------
    params : namedtuple
        Instance of NormalParams with the sample mean and the sample
        standard deviation (ddof=1)

    """
    sample = _validate_sample(sample)
    return _estimate_normal_params(sample)


def _estimate_normal_params(sample):
    mu = np.mean(sample)
    sigma = np.std(sample, ddof=1)
    if not sigma > 0:
        msg = f"Estimated standard deviation must be positive, got sigma={sigma}"
        raise InvalidInputError(msg)

    return NormalParams(float(mu), float(sigma))


@jjit
def normalization_constant(mu, sigma, x_lo, x_hi):
    """Probability mass of Normal(mu, sigma) between x_lo and x_hi

    x_hi may be jnp.inf to normalize over the full upper tail
    """
    cdf_hi = jstats.norm.cdf(x_hi, loc=mu, scale=sigma)
    cdf_lo = jstats.norm.cdf(x_lo, loc=mu, scale=sigma)
    return cdf_hi - cdf_lo


@partial(jjit, static_argnames=["grid_size"])
def _truncated_density_kern(mu, sigma, x_min, x_max, x_lo, x_hi, grid_size):
    xarr = get_linspace_grid(x_min, x_max, grid_size)
    pdf = jstats.norm.pdf(xarr, loc=mu, scale=sigma)
    z = normalization_constant(mu, sigma, x_lo, x_hi)
    return xarr, pdf / z


@partial(jjit, static_argnames=["grid_size"])
def _unconditional_density_kern(mu, sigma, x_min, x_max, grid_size):
    xarr = get_linspace_grid(x_min, x_max, grid_size)
    pdf = jstats.norm.pdf(xarr, loc=mu, scale=sigma)
    return xarr, pdf


def truncated_density_from_params(
    params, x_min, x_max, x_lo, x_hi, grid_size=DEFAULT_GRID_SIZE
):
    """Truncated normal density for known parameters

    Parameters
    ----------
    params : namedtuple
        Instance of NormalParams

    x_min, x_max : floats
        Endpoints of the output grid

    x_lo, x_hi : floats
        Truncation bounds that define the normalization constant

    grid_size : int, optional
        Number of grid points. Default is DEFAULT_GRID_SIZE

    Returns
    -------
    density_grid : namedtuple
        Instance of DensityGrid

    """
    grid_size = _validate_grid_size(grid_size)
    xarr, density = _truncated_density_kern(
        params.mu, params.sigma, x_min, x_max, x_lo, x_hi, grid_size
    )
    return DensityGrid(xarr, density)


def unconditional_density_grid(params, x_min, x_max, grid_size=DEFAULT_GRID_SIZE):
    """Normal pdf on the same grid without renormalization"""
    grid_size = _validate_grid_size(grid_size)
    xarr, pdf = _unconditional_density_kern(
        params.mu, params.sigma, x_min, x_max, grid_size
    )
    return DensityGrid(xarr, pdf)


def truncated_density_grid(
    sample, threshold, grid_size=DEFAULT_GRID_SIZE, normalization=NORM_SAMPLE_RANGE
):
    """Renormalized normal density over the range of a truncated sample

    Parameters
    ----------
    sample : array, shape (n, )
        Values of a normal sample that exceed threshold

    threshold : float
        Truncation threshold used to build the sample

    grid_size : int, optional
        Number of equally spaced points from min(sample) to max(sample)
        Default is DEFAULT_GRID_SIZE

    normalization : string, optional
        "sample_range" divides by the mass between min(sample) and max(sample),
        so that the curve integrates to unity over the plotted grid.
        "support" divides by the mass above threshold, i.e., the true
        truncated-distribution normalization.

    Returns
    -------
    density_grid : namedtuple
        Instance of DensityGrid with fields x and density

    """
    if normalization not in NORMALIZATIONS:
        msg = f"normalization must be one of {NORMALIZATIONS}, got `{normalization}`"
        raise InvalidInputError(msg)

    if not np.isfinite(threshold):
        raise InvalidInputError(f"threshold must be finite, got {threshold}")

    sample = _validate_sample(sample)
    if np.any(sample < threshold):
        n_below = int(np.sum(sample < threshold))
        msg = f"{n_below} sample values lie below threshold={threshold}"
        raise InvalidInputError(msg)

    params = _estimate_normal_params(sample)
    x_min, x_max = float(sample.min()), float(sample.max())

    if normalization == NORM_SUPPORT:
        x_lo, x_hi = threshold, jnp.inf
    else:
        x_lo, x_hi = x_min, x_max

    return truncated_density_from_params(
        params, x_min, x_max, x_lo, x_hi, grid_size=grid_size
    )


def integrate_density_grid(density_grid):
    """Trapezoid-rule integral of a DensityGrid over its domain"""
    return float(trapezoid_integral(density_grid.x, density_grid.density))


def _validate_sample(sample):
    sample = np.asarray(sample, dtype=float)

    if sample.ndim != 1:
        raise InvalidInputError(f"sample must be 1-d, got shape {sample.shape}")
    if sample.size == 0:
        raise InvalidInputError("sample is empty")
    if not np.all(np.isfinite(sample)):
        raise InvalidInputError("sample contains non-finite values")
    if sample.size < 2:
        raise InvalidInputError("sample standard deviation requires n >= 2")
    if np.all(sample == sample[0]):
        msg = f"All sample values equal {sample[0]}: zero standard deviation"
        raise InvalidInputError(msg)

    return sample


def _validate_grid_size(grid_size):
    try:
        grid_size = operator.index(grid_size)
    except TypeError:
        raise InvalidInputError(f"grid_size must be an integer, got {grid_size!r}")
    if grid_size < 2:
        msg = f"grid_size must be at least 2, got {grid_size}"
        raise InvalidInputError(msg)
    return grid_size
