"""Default parameters of the truncated normal model"""

import os
from collections import namedtuple

NormalParams = namedtuple("NormalParams", ("mu", "sigma"))
DEFAULT_NORMAL_PARAMS = NormalParams(mu=0.0, sigma=1.0)

DEFAULT_THRESHOLD = 0.5
DEFAULT_N_DRAWS = 10_000
DEFAULT_GRID_SIZE = 10_000
DEFAULT_NBINS = 50
DEFAULT_SEED = 0

NORM_SAMPLE_RANGE = "sample_range"
NORM_SUPPORT = "support"
NORMALIZATIONS = (NORM_SAMPLE_RANGE, NORM_SUPPORT)

try:
    DEFAULT_DRN_OUT = os.environ["TRUNCDENS_DRN_OUT"]
except KeyError:
    DEFAULT_DRN_OUT = ""
