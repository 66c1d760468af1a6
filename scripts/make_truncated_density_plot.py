"""Script to simulate a truncated normal sample and plot its renormalized density"""

import argparse

from jax import random as jran

from truncdens import pdf_model_utils as pmu
from truncdens import truncated_density as td
from truncdens.defaults import (
    DEFAULT_DRN_OUT,
    DEFAULT_GRID_SIZE,
    DEFAULT_N_DRAWS,
    DEFAULT_NBINS,
    DEFAULT_NORMAL_PARAMS,
    DEFAULT_SEED,
    DEFAULT_THRESHOLD,
    NORM_SAMPLE_RANGE,
    NORMALIZATIONS,
)
from truncdens.diagnostics import plot_truncated_density as ptd

if __name__ == "__main__":

    parser = argparse.ArgumentParser()
    parser.add_argument("-mu", type=float, default=DEFAULT_NORMAL_PARAMS.mu)
    parser.add_argument("-sigma", type=float, default=DEFAULT_NORMAL_PARAMS.sigma)
    parser.add_argument("-threshold", type=float, default=DEFAULT_THRESHOLD)
    parser.add_argument("-n_draws", type=int, default=DEFAULT_N_DRAWS)
    parser.add_argument("-grid_size", type=int, default=DEFAULT_GRID_SIZE)
    parser.add_argument("-nbins", type=int, default=DEFAULT_NBINS)
    parser.add_argument("-seed", type=int, default=DEFAULT_SEED)
    parser.add_argument(
        "-normalization", choices=NORMALIZATIONS, default=NORM_SAMPLE_RANGE
    )
    parser.add_argument("-drn_out", help="Output directory", default=DEFAULT_DRN_OUT)
    parser.add_argument("-nickname", help="Prefix of output png", default="default")
    args = parser.parse_args()

    ran_key = jran.key(args.seed)
    sample = pmu.mc_truncated_sample(
        ran_key, args.n_draws, args.mu, args.sigma, args.threshold
    )
    print(f"...kept {sample.size} of {args.n_draws} draws above t={args.threshold}")

    density_grid = td.truncated_density_grid(
        sample,
        args.threshold,
        grid_size=args.grid_size,
        normalization=args.normalization,
    )
    params = td.estimate_normal_params(sample)
    print(f"...estimated mu={params.mu:.4f} sigma={params.sigma:.4f}")

    integral = td.integrate_density_grid(density_grid)
    naive_integral = td.integrate_density_grid(
        td.unconditional_density_grid(
            params, density_grid.x[0], density_grid.x[-1], args.grid_size
        )
    )
    print(f"...integral of renormalized density = {integral:.5f}")
    print(f"...integral of unconditional density = {naive_integral:.5f}")

    ptd.plot_truncated_density_overlay(
        sample,
        args.threshold,
        grid_size=args.grid_size,
        normalization=args.normalization,
        nbins=args.nbins,
        drn_out=args.drn_out,
        model_nickname=args.nickname,
    )
