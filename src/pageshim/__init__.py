"""pageshim — deterministic clock and random overrides for archived page replay."""

__version__ = "0.1.0"

from pageshim.config.defaults import default_lcg as default_lcg
from pageshim.config.defaults import default_shim_config as default_shim_config
from pageshim.config.schema import LcgParameters as LcgParameters
from pageshim.config.schema import ShimConfig as ShimConfig
from pageshim.core.clock import CallStyle as CallStyle
from pageshim.core.clock import ClockOverride as ClockOverride
from pageshim.core.clock import native_date as native_date
from pageshim.core.environment import Environment as Environment
from pageshim.core.rng import LcgRandom as LcgRandom
from pageshim.core.rng import make_rng as make_rng
from pageshim.core.snippet import render_shim as render_shim
from pageshim.core.snippet import render_shim_for as render_shim_for
