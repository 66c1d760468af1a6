"""Monte Carlo generators of normal and truncated normal samples"""

from functools import partial

import numpy as np
from jax import jit as jjit
from jax import numpy as jnp
from jax import random as jran
from jax.scipy import stats as jstats


@partial(jjit, static_argnames=["n_draws"])
def mc_normal_draws(ran_key, n_draws, mu, sigma):
    """i.i.d. draws from Normal(mu, sigma)"""
    return mu + sigma * jran.normal(ran_key, (n_draws,))


def mc_truncated_sample(ran_key, n_draws, mu, sigma, threshold):
    """Draw n_draws normal values and keep those that are >= threshold

    Returns
    -------
    sample : ndarray, shape (n_keep, )
        n_keep <= n_draws is a random variable

    """
    draws = np.asarray(mc_normal_draws(ran_key, n_draws, mu, sigma))
    return draws[draws >= threshold]


@partial(jjit, static_argnames=["shape"])
def truncated_normal_sample(ran_key, shape, mu, sigma, x_min, x_max=jnp.inf):
    """Inverse-CDF draws from Normal(mu, sigma) restricted to [x_min, x_max]

    Returns
    -------
    x_sample : array, shape (*shape, )

    zscore : array, shape (*shape, )
        (x_sample - mu) / sigma

    """
    alpha = (x_min - mu) / sigma
    beta = (x_max - mu) / sigma

    cdf_x_min = jstats.norm.cdf(alpha)
    cdf_x_max = jstats.norm.cdf(beta)

    uran = jran.uniform(ran_key, shape, minval=cdf_x_min, maxval=cdf_x_max)
    # float32 rounding can reach cdf_x_max, where ppf diverges for x_max=inf
    uran = jnp.minimum(uran, jnp.nextafter(cdf_x_max, cdf_x_min))

    zscore = jstats.norm.ppf(uran)
    x_sample = mu + sigma * zscore

    # clamp to bounds for numerical safety
    x_sample = jnp.clip(x_sample, x_min, x_max)
    zscore = (x_sample - mu) / sigma

    return x_sample, zscore
