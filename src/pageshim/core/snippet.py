"""Render the page-side determinism shim with its literals substituted."""

from __future__ import annotations

import logging
import re

from pageshim.config.defaults import default_shim_config
from pageshim.config.schema import ShimConfig
from pageshim.io.loaders import load_package_text
from pageshim.utils.exceptions import PlaceholderError

log = logging.getLogger(__name__)

TEMPLATE_PATH = "resources/override_date_and_random.js"

# Unsubstituted, DATE is an undefined identifier and the snippet throws a
# ReferenceError as soon as a page evaluates it.
REFERENCE_PLACEHOLDER = "DATE"
PLACEHOLDERS: tuple[str, ...] = (
    REFERENCE_PLACEHOLDER,
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "LCG_MODULUS",
)


def _token_pattern(token: str) -> re.Pattern[str]:
    return re.compile(rf"\b{token}\b")


def shim_template() -> str:
    """The raw snippet, placeholders intact."""
    return load_package_text(TEMPLATE_PATH)


def substitute(template: str, values: dict[str, int]) -> str:
    """Replace each placeholder token in ``template`` with an integer literal.

    Raises:
        PlaceholderError: If the template lacks a placeholder or one survives.
    """
    missing = [token for token in values if not _token_pattern(token).search(template)]
    if missing:
        raise PlaceholderError(f"template has no placeholder for {', '.join(missing)}")
    source = template
    for token, value in values.items():
        source = _token_pattern(token).sub(str(int(value)), source)
    leftover = [token for token in PLACEHOLDERS if _token_pattern(token).search(source)]
    if leftover:
        raise PlaceholderError(f"unsubstituted placeholders: {', '.join(leftover)}")
    return source


def render_shim(config: ShimConfig) -> str:
    """Snippet for ``config``; empty when the shim is disabled."""
    if not config.enabled:
        return ""
    source = substitute(
        shim_template(),
        {
            REFERENCE_PLACEHOLDER: config.reference_instant,
            "LCG_MULTIPLIER": config.lcg.multiplier,
            "LCG_INCREMENT": config.lcg.increment,
            "LCG_MODULUS": config.lcg.modulus,
        },
    )
    log.debug("Rendered shim for reference instant %d", config.reference_instant)
    return source


def render_shim_for(reference_ms: int) -> str:
    """Snippet pinned to ``reference_ms`` with the reference LCG constants."""
    return render_shim(default_shim_config(reference_ms))
