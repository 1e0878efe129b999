"""Loaders for YAML files and text resources shipped inside the package."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_package_text(relative_path: str) -> str:
    """Read a text file relative to the pageshim package root.

    Args:
        relative_path: Path relative to ``src/pageshim/``,
            e.g. ``"resources/override_date_and_random.js"``.
    """
    package_root = Path(__file__).resolve().parent.parent
    return (package_root / relative_path).read_text(encoding="utf-8")
