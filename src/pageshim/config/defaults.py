"""Default configuration values for pageshim."""

from __future__ import annotations

from pageshim.config.schema import LcgParameters, ShimConfig

# Constants shared with pywb's replay-side Math.random override, so a page
# rendered by the crawler draws the same sequence it later draws on replay.
LCG_MULTIPLIER: int = 9301
LCG_INCREMENT: int = 49297
LCG_MODULUS: int = 233280


def default_lcg() -> LcgParameters:
    """Reference LCG constants."""
    return LcgParameters(
        multiplier=LCG_MULTIPLIER,
        increment=LCG_INCREMENT,
        modulus=LCG_MODULUS,
    )


def default_shim_config(reference_instant: int) -> ShimConfig:
    """Shim config pinned to ``reference_instant`` with the reference constants."""
    return ShimConfig(reference_instant=reference_instant, lcg=default_lcg())
