"""Serialization for shim configs and drawn random sequences."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pageshim.config.schema import ShimConfig
from pageshim.io.loaders import load_yaml
from pageshim.utils.exceptions import ConfigError

YAML_SUFFIXES = (".yaml", ".yml")


def compute_config_hash(config: ShimConfig) -> str:
    """Compute a deterministic SHA-256 hash of a shim config.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    canonical = json.dumps(config.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(config: ShimConfig) -> str:
    """Serialize a shim config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def _validate(data: Any) -> ShimConfig:
    try:
        return ShimConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(json_str: str) -> ShimConfig:
    """Deserialize a shim config from a JSON string."""
    try:
        data: dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}") from exc
    return _validate(data)


def load_config_file(path: Path) -> ShimConfig:
    """Load a shim config from a JSON or YAML file, chosen by suffix."""
    if path.suffix.lower() in YAML_SUFFIXES:
        return _validate(load_yaml(path))
    return load_config(path.read_text())


def dump_sequence(config: ShimConfig, values: Sequence[float]) -> str:
    """Serialize a drawn random sequence for cross-run comparison."""
    data = {
        "reference_instant": config.reference_instant,
        "lcg": config.lcg.model_dump(),
        "config_hash": compute_config_hash(config),
        "values": [float(v) for v in values],
    }
    return json.dumps(data, indent=2)
