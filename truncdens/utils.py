# flake8: noqa: E402
"""
"""

from jax import config

config.update("jax_enable_x64", True)

from functools import partial

from jax import jit as jjit
from jax import numpy as jnp


@partial(jjit, static_argnames=["npts"])
def get_linspace_grid(x_min, x_max, npts):
    """Equally spaced grid from x_min to x_max inclusive"""
    return jnp.linspace(x_min, x_max, npts)


@jjit
def trapezoid_integral(x, y):
    """Integral of y(x) by the trapezoid rule

    Parameters
    ----------
    x : array, shape (n, )
        Monotonic abscissa

    y : array, shape (n, )
        Function evaluated at x

    Returns
    -------
    integral : float

    """
    dx = jnp.diff(x)
    return jnp.sum(0.5 * (y[1:] + y[:-1]) * dx)
