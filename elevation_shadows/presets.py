"""Standard Material opacity profile for elevation shadows."""
from __future__ import annotations

from typing import Optional, Sequence

from .color import Color
from .shadow import Shadow
from .shadow_list import ramp_opacity

# Umbra, penumbra and ambient layer opacities.
OPACITY_RAMP = (0.2, 0.14, 0.12)


def materialize(shadows: Sequence[Shadow], color: Optional[Color] = None) -> Sequence[Shadow]:
    """Apply :data:`OPACITY_RAMP` to ``shadows``, optionally recoloring them.

    Shadows past the third all take the ambient opacity. An empty sequence is
    returned as given.
    """

    if not shadows:
        return shadows
    return ramp_opacity(shadows, OPACITY_RAMP, color)


__all__ = ["OPACITY_RAMP", "materialize"]
