""" """

import numpy as np
from jax import random as jran

from .. import pdf_model_utils as pmu


def test_truncated_normal_sample_two_sided():
    ran_key = jran.key(0)
    n_sample = 2_000
    mu, sigma = 0.4, 0.2
    lo, hi = 0.2, 1.0
    sample, zscore = pmu.truncated_normal_sample(
        ran_key, (n_sample,), mu, sigma, lo, hi
    )
    assert sample.shape == (n_sample,)
    assert np.all(np.isfinite(sample))
    assert np.all((sample >= lo) & (sample <= hi))
    assert np.allclose(zscore, (sample - mu) / sigma)


def test_truncated_normal_sample_upper_tail():
    ran_key = jran.key(0)
    sample, zscore = pmu.truncated_normal_sample(ran_key, (1_000,), 0.0, 1.0, 0.5)
    assert np.all(np.isfinite(sample))
    assert np.all(sample >= 0.5)
    assert np.allclose(sample, zscore)


def test_mc_normal_draws():
    ran_key = jran.key(0)
    draws = pmu.mc_normal_draws(ran_key, 20_000, 1.0, 2.0)
    assert draws.shape == (20_000,)
    assert np.allclose(np.mean(draws), 1.0, atol=0.1)
    assert np.allclose(np.std(draws), 2.0, atol=0.1)


def test_mc_truncated_sample():
    ran_key = jran.key(0)
    n_draws = 10_000
    threshold = 0.5
    sample = pmu.mc_truncated_sample(ran_key, n_draws, 0.0, 1.0, threshold)
    assert np.all(sample >= threshold)
    # P(x > 0.5) = 0.3085 for a unit normal
    assert 2_800 < sample.size < 3_400


def test_mc_truncated_sample_is_reproducible():
    sample = pmu.mc_truncated_sample(jran.key(3), 1_000, 0.0, 1.0, 0.0)
    sample2 = pmu.mc_truncated_sample(jran.key(3), 1_000, 0.0, 1.0, 0.0)
    assert np.array_equal(sample, sample2)
