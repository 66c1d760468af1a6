""""""

# flake8: noqa
from ._version import __version__
from .exceptions import InvalidInputError
from .truncated_density import (
    DensityGrid,
    integrate_density_grid,
    truncated_density_grid,
)
