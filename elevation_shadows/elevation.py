"""Shadows for arbitrary elevations, interpolated from a sparse lookup table."""
from __future__ import annotations

import bisect
import logging
from functools import lru_cache
from typing import Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .color import Color
from .config import get_settings
from .errors import ConfigurationError
from .material import ELEVATION_100, MATERIAL_ELEVATION_SHADOWS
from .shadow import Shadow, lerp_shadows
from .shadow_list import colorize

logger = logging.getLogger(__name__)


class Decoration(BaseModel):
    """Paint description handed to rendering code."""

    model_config = ConfigDict(frozen=True)

    box_shadow: Tuple[Shadow, ...] = ()


class ElevationTable:
    """Derive a shadow set for any elevation from known levels.

    ``table`` maps elevation levels to their canonical shadows. Requests that
    fall between two levels blend the neighbouring entries linearly. Requests
    above the largest level blend towards ``anchor``, which stands in for
    ``anchor_elevation``; anything at or above ``anchor_elevation`` returns the
    anchor itself.

    Elevations are expected to be non-negative. A request below the smallest
    key raises ``ValueError`` rather than being clamped.
    """

    def __init__(
        self,
        table: Mapping[float, Sequence[Shadow]],
        anchor: Sequence[Shadow],
        anchor_elevation: float = 100.0,
    ) -> None:
        if not table:
            raise ConfigurationError("Elevation table has no levels")
        self._keys: Tuple[float, ...] = tuple(sorted(table))
        if anchor_elevation <= self._keys[-1]:
            raise ConfigurationError(
                f"Anchor elevation {anchor_elevation} must exceed the largest level {self._keys[-1]}"
            )
        self._table = {key: tuple(table[key]) for key in self._keys}
        self._anchor = tuple(anchor)
        self._anchor_elevation = anchor_elevation
        logger.debug("Elevation table built with levels %s, anchor at %s", self._keys, anchor_elevation)

    @property
    def keys(self) -> Tuple[float, ...]:
        return self._keys

    @property
    def anchor_elevation(self) -> float:
        return self._anchor_elevation

    def as_shadows(
        self,
        elevation: float,
        color: Optional[Color] = None,
        preserve_opacity: bool = True,
    ) -> Tuple[Shadow, ...]:
        """Return the shadow set for ``elevation``, optionally recolored.

        Raises :class:`InterpolationError` when the two bracketing shadow
        sets differ in length.
        """

        if elevation in self._table:
            return colorize(self._table[elevation], color, preserve_opacity)
        if elevation >= self._anchor_elevation:
            return colorize(self._anchor, color, preserve_opacity)

        index = bisect.bisect_right(self._keys, elevation)
        if index == 0:
            raise ValueError(f"Elevation {elevation} is below the lowest level {self._keys[0]}")
        low_key = self._keys[index - 1]
        if index < len(self._keys):
            high_key = self._keys[index]
            high = self._table[high_key]
        else:
            high_key = self._anchor_elevation
            high = self._anchor

        fraction = (elevation - low_key) / (high_key - low_key)
        logger.debug("Elevation %s blends levels %s and %s at %.4f", elevation, low_key, high_key, fraction)
        return lerp_shadows(
            colorize(self._table[low_key], color, preserve_opacity),
            colorize(high, color, preserve_opacity),
            fraction,
        )

    def as_decoration(
        self,
        elevation: float,
        color: Optional[Color] = None,
        preserve_opacity: bool = True,
    ) -> Decoration:
        return Decoration(box_shadow=self.as_shadows(elevation, color, preserve_opacity))


@lru_cache()
def get_elevation_table() -> ElevationTable:
    """Return the shared Material elevation table."""

    settings = get_settings()
    return ElevationTable(MATERIAL_ELEVATION_SHADOWS, ELEVATION_100, settings.anchor_elevation)


def as_shadows(
    elevation: float,
    color: Optional[Color] = None,
    preserve_opacity: Optional[bool] = None,
) -> Tuple[Shadow, ...]:
    """Material shadows for ``elevation`` using the shared table."""

    if preserve_opacity is None:
        preserve_opacity = get_settings().preserve_opacity
    return get_elevation_table().as_shadows(elevation, color, preserve_opacity)


def as_decoration(
    elevation: float,
    color: Optional[Color] = None,
    preserve_opacity: Optional[bool] = None,
) -> Decoration:
    if preserve_opacity is None:
        preserve_opacity = get_settings().preserve_opacity
    return get_elevation_table().as_decoration(elevation, color, preserve_opacity)


__all__ = [
    "Decoration",
    "ElevationTable",
    "as_decoration",
    "as_shadows",
    "get_elevation_table",
]
