"""Position component.

Floating point coordinates, either in world space (as reported for entities)
or in screen space (after the host's world-to-screen projection).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """2D coordinate.

    Attributes:
        x: Horizontal coordinate (0 at left).
        y: Vertical coordinate (0 at top).
    """

    x: float
    y: float
