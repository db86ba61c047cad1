"""Transforms applied across an ordered sequence of shadows."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from .color import Color
from .shadow import Shadow, overlay_color

ColorArg = Union[Color, Sequence[Color], None]
StopArg = Union[float, Sequence[float]]


def _recolor(shadow: Shadow, color: Color, preserve_opacity: bool) -> Shadow:
    if preserve_opacity:
        color = color.with_opacity(shadow.color.opacity)
    return overlay_color(shadow, color)


def colorize(
    shadows: Sequence[Shadow],
    colors: ColorArg = None,
    preserve_opacity: bool = True,
) -> Tuple[Shadow, ...]:
    """Apply one color to every shadow, or a list of colors positionally.

    With ``preserve_opacity`` each shadow keeps its own opacity and only takes
    the RGB channels of the new color. A color list shorter than ``shadows``
    leaves the remaining shadows with their original colors.
    """

    if colors is None:
        return tuple(shadows)
    if isinstance(colors, Color):
        return tuple(_recolor(shadow, colors, preserve_opacity) for shadow in shadows)

    colors = tuple(colors)
    return tuple(
        _recolor(shadow, colors[index], preserve_opacity) if index < len(colors) else shadow
        for index, shadow in enumerate(shadows)
    )


def ramp_opacity(
    shadows: Sequence[Shadow],
    stops: StopArg,
    color: Optional[Color] = None,
) -> Tuple[Shadow, ...]:
    """Set each shadow's opacity from ``stops``.

    A single stop applies to every shadow. A list applies positionally and its
    last value is reused for shadows beyond its length. When ``color`` is given
    it replaces every shadow's color before the stop sets the final opacity.
    """

    if isinstance(stops, (int, float)):
        stops = (float(stops),)
    else:
        stops = tuple(stops)
    if not stops:
        return tuple(shadows)

    ramped = []
    for index, shadow in enumerate(shadows):
        base = color if color is not None else shadow.color
        stop = stops[min(index, len(stops) - 1)]
        ramped.append(overlay_color(shadow, base.with_opacity(stop)))
    return tuple(ramped)


__all__ = ["colorize", "ramp_opacity"]
