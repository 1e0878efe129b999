"""Custom exceptions for pageshim."""

from __future__ import annotations


class PageshimError(Exception):
    """Base exception for pageshim."""


class ConfigError(PageshimError):
    """Invalid configuration."""


class InvalidDateError(PageshimError, ValueError):
    """Arguments the native date constructor cannot turn into a date."""


class PlaceholderError(PageshimError):
    """A shim template placeholder was left unsubstituted."""


class ShimInstallError(PageshimError):
    """The shim is already installed in the target scope."""
