"""Single drop-shadow record and the transforms that act on one shadow."""
from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .color import BLACK, Color, lerp, lerp_color
from .errors import InterpolationError


class Shadow(BaseModel):
    """An offset, blur radius, spread radius and color.

    Instances are frozen; every helper below returns a new shadow. A negative
    ``blur_radius`` is never produced by this module unless the caller asks
    for one (for example by scaling with a negative factor).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    offset_x: float = 0.0
    offset_y: float = 0.0
    blur_radius: float = 0.0
    spread_radius: float = 0.0
    color: Color = Field(default=BLACK)


def _replace(shadow: Shadow, fields: Dict[str, Any]) -> Shadow:
    return type(shadow).model_validate({**dict(shadow), **fields})


def copy_with(shadow: Shadow, **fields: Any) -> Shadow:
    """Return ``shadow`` with only the supplied fields replaced."""

    unknown = set(fields) - set(Shadow.model_fields)
    if unknown:
        raise TypeError(f"Unknown shadow field(s): {', '.join(sorted(unknown))}")
    return _replace(shadow, fields)


def overlay_color(shadow: Shadow, color: Color) -> Shadow:
    """Replace the shadow's color outright, opacity included."""

    return _replace(shadow, {"color": color})


def scale_blur(shadow: Shadow, factor: float) -> Shadow:
    return _replace(shadow, {"blur_radius": shadow.blur_radius * factor})


def grow_spread(shadow: Shadow, delta: float) -> Shadow:
    return _replace(shadow, {"spread_radius": shadow.spread_radius + delta})


def shrink_spread(shadow: Shadow, delta: float) -> Shadow:
    return _replace(shadow, {"spread_radius": shadow.spread_radius - delta})


def scale_offset(shadow: Shadow, scale_x: float, scale_y: float) -> Shadow:
    """Multiply the horizontal and vertical offsets independently."""

    return _replace(
        shadow, {"offset_x": shadow.offset_x * scale_x, "offset_y": shadow.offset_y * scale_y}
    )


def lerp_shadow(a: Shadow, b: Shadow, t: float) -> Shadow:
    """Blend every field of two shadows at fraction ``t``."""

    return Shadow(
        offset_x=lerp(a.offset_x, b.offset_x, t),
        offset_y=lerp(a.offset_y, b.offset_y, t),
        blur_radius=lerp(a.blur_radius, b.blur_radius, t),
        spread_radius=lerp(a.spread_radius, b.spread_radius, t),
        color=lerp_color(a.color, b.color, t),
    )


def lerp_shadows(a: Sequence[Shadow], b: Sequence[Shadow], t: float) -> Tuple[Shadow, ...]:
    """Blend two shadow sequences position by position.

    Both sequences must have the same length; otherwise an
    :class:`InterpolationError` is raised instead of truncating either side.
    """

    if len(a) != len(b):
        raise InterpolationError(f"Cannot blend {len(a)} shadows with {len(b)} shadows")
    return tuple(lerp_shadow(first, second, t) for first, second in zip(a, b))


__all__ = [
    "Shadow",
    "copy_with",
    "grow_spread",
    "lerp_shadow",
    "lerp_shadows",
    "overlay_color",
    "scale_blur",
    "scale_offset",
    "shrink_spread",
]
