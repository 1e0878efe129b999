"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pageshim.config.defaults import default_shim_config
from pageshim.config.schema import ShimConfig
from pageshim.core.environment import Environment

REFERENCE_MS = 1_700_000_000_000


@pytest.fixture
def config() -> ShimConfig:
    """Shim config pinned to 2023-11-14T22:13:20Z."""
    return default_shim_config(REFERENCE_MS)


@pytest.fixture
def env(config: ShimConfig) -> Environment:
    """Fresh execution context for each test."""
    return Environment(config)
