"""Material Design elevation shadows keyed by elevation level."""

from __future__ import annotations

from typing import Dict, Tuple

from .color import Color
from .shadow import Shadow

UMBRA_COLOR = Color.from_argb(0x33000000)  # opacity 0.2
PENUMBRA_COLOR = Color.from_argb(0x24000000)  # opacity ~0.14
AMBIENT_COLOR = Color.from_argb(0x1F000000)  # opacity ~0.12

ShadowSet = Tuple[Shadow, Shadow, Shadow]


def _layers(
    umbra: Tuple[float, float, float],
    penumbra: Tuple[float, float, float],
    ambient: Tuple[float, float, float],
) -> ShadowSet:
    # Each tuple is (offset_y, blur_radius, spread_radius).
    return tuple(
        Shadow(offset_y=offset_y, blur_radius=blur, spread_radius=spread, color=color)
        for (offset_y, blur, spread), color in (
            (umbra, UMBRA_COLOR),
            (penumbra, PENUMBRA_COLOR),
            (ambient, AMBIENT_COLOR),
        )
    )


# Elevation 0 keeps three zero-size layers so every level blends against
# another three-layer set.
MATERIAL_ELEVATION_SHADOWS: Dict[int, ShadowSet] = {
    0: _layers((0, 0, 0), (0, 0, 0), (0, 0, 0)),
    1: _layers((2, 1, -1), (1, 1, 0), (1, 3, 0)),
    2: _layers((3, 1, -2), (2, 2, 0), (1, 5, 0)),
    3: _layers((3, 3, -2), (3, 4, 0), (1, 8, 0)),
    4: _layers((2, 4, -1), (4, 5, 0), (1, 10, 0)),
    6: _layers((3, 5, -1), (6, 10, 0), (1, 18, 0)),
    8: _layers((5, 5, -3), (8, 10, 1), (3, 14, 2)),
    9: _layers((5, 6, -3), (9, 12, 1), (3, 16, 2)),
    12: _layers((7, 8, -4), (12, 17, 2), (5, 22, 4)),
    16: _layers((8, 10, -5), (16, 24, 2), (6, 30, 5)),
    24: _layers((11, 15, -7), (24, 38, 3), (9, 46, 8)),
}

# Hand-tuned to look close to a surface at elevation 100. Used only as the
# upper interpolation bound past the largest real level.
ELEVATION_100: ShadowSet = _layers((160, 50, -50), (100, 150, -25), (35, 250, -10))

__all__ = [
    "AMBIENT_COLOR",
    "ELEVATION_100",
    "MATERIAL_ELEVATION_SHADOWS",
    "PENUMBRA_COLOR",
    "ShadowSet",
    "UMBRA_COLOR",
]
