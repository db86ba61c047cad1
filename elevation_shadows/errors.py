"""Exceptions raised by the shadow and elevation helpers."""
from __future__ import annotations


class ShadowError(Exception):
    """Base class for shadow computation failures."""


class InterpolationError(ShadowError):
    """Two shadow sequences could not be blended."""


class ConfigurationError(ShadowError):
    """An elevation table was built from unusable data."""


__all__ = ["ShadowError", "InterpolationError", "ConfigurationError"]
