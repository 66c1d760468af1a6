""" """

import os

import numpy as np

from .. import pdf_model_utils as pmu
from .. import truncated_density as td
from ..defaults import (
    DEFAULT_DRN_OUT,
    DEFAULT_GRID_SIZE,
    DEFAULT_N_DRAWS,
    DEFAULT_NBINS,
    DEFAULT_NORMAL_PARAMS,
    NORM_SAMPLE_RANGE,
)

try:
    import matplotlib.cm as cm
    from matplotlib import pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
MATPLOTLIB_MSG = "Must have matplotlib installed to use this function"

MBLUE = "#1f77b4"
MRED = "#d62728"


def plot_truncated_density_overlay(
    sample,
    threshold,
    *,
    grid_size=DEFAULT_GRID_SIZE,
    normalization=NORM_SAMPLE_RANGE,
    nbins=DEFAULT_NBINS,
    drn_out=DEFAULT_DRN_OUT,
    model_nickname="default",
):
    """Density histogram of a truncated sample with the model curves on top

    The renormalized density is drawn as a solid line and the unconditional
    normal pdf as a dashed line, so the two can be compared by eye.

    Parameters
    ----------
    sample : array, shape (n, )
        Values of a normal sample that exceed threshold

    threshold : float

    Returns
    -------
    fig : matplotlib Figure

    """
    assert HAS_MATPLOTLIB, MATPLOTLIB_MSG

    if drn_out != "":
        os.makedirs(drn_out, exist_ok=True)

    density_grid = td.truncated_density_grid(
        sample, threshold, grid_size=grid_size, normalization=normalization
    )
    params = td.estimate_normal_params(sample)
    naive_grid = td.unconditional_density_grid(
        params, density_grid.x[0], density_grid.x[-1], grid_size=grid_size
    )

    fig, ax = plt.subplots(1, 1)
    ax.hist(sample, bins=nbins, density=True, alpha=0.7, color="lightgray")
    ax.plot(
        density_grid.x, density_grid.density, "-", color=MRED, label="truncated"
    )
    ax.plot(naive_grid.x, naive_grid.density, "--", color=MBLUE, label="naive")
    ax.legend()

    xlabel = ax.set_xlabel(r"$x$")
    ylabel = ax.set_ylabel(r"${\rm PDF}(x\ \vert\ x\geq t)$")
    ax.set_title(rf"$t={threshold:.2f}$")

    bnout = f"{model_nickname}_truncated_density_t={threshold:.2f}.png"
    fnout = os.path.join(drn_out, bnout)

    fig.savefig(
        fnout, bbox_extra_artists=[xlabel, ylabel], bbox_inches="tight", dpi=200
    )
    plt.close()
    return fig


def plot_threshold_comparison(
    ran_key,
    thresholds,
    *,
    params=DEFAULT_NORMAL_PARAMS,
    n_draws=DEFAULT_N_DRAWS,
    grid_size=DEFAULT_GRID_SIZE,
    drn_out=DEFAULT_DRN_OUT,
    model_nickname="default",
):
    """Renormalized density curves of one normal distribution at several thresholds

    Every curve uses the same underlying sample of n_draws normal values,
    truncated at each threshold in turn.

    Parameters
    ----------
    ran_key : jax.random.key

    thresholds : sequence of floats

    params : namedtuple, optional
        Instance of NormalParams. Default is DEFAULT_NORMAL_PARAMS

    Returns
    -------
    fig : matplotlib Figure

    """
    assert HAS_MATPLOTLIB, MATPLOTLIB_MSG

    if drn_out != "":
        os.makedirs(drn_out, exist_ok=True)

    draws = np.asarray(pmu.mc_normal_draws(ran_key, n_draws, *params))
    colors = cm.coolwarm(np.linspace(0, 1, len(thresholds)))

    fig, ax = plt.subplots(1, 1)
    for threshold, color in zip(thresholds, colors):
        sample = draws[draws >= threshold]
        density_grid = td.truncated_density_grid(sample, threshold, grid_size)
        ax.plot(
            density_grid.x,
            density_grid.density,
            color=color,
            label=rf"$t={threshold:.2f}$",
        )
    ax.legend()

    xlabel = ax.set_xlabel(r"$x$")
    ylabel = ax.set_ylabel(r"${\rm PDF}(x\ \vert\ x\geq t)$")

    bnout = f"{model_nickname}_truncated_density_threshold_comparison.png"
    fnout = os.path.join(drn_out, bnout)

    fig.savefig(
        fnout, bbox_extra_artists=[xlabel, ylabel], bbox_inches="tight", dpi=200
    )
    plt.close()
    return fig
