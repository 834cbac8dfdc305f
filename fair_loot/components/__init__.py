"""fair_loot.components
=====================

Frozen dataclass views of the host-engine entities the arbiter reads
(players, collectible pedestals, items being picked up) plus the
``TextAnnotation`` value it emits for rendering.

Components carry no behavior; the ``systems`` package interprets them::

    from fair_loot.components import Pedestal, Player
"""

from .annotation import Color, TextAnnotation
from .pedestal import Pedestal
from .picking_up import PickingUpItem
from .player import Player
from .position import Position

__all__ = [
    "Color",
    "Pedestal",
    "PickingUpItem",
    "Player",
    "Position",
    "TextAnnotation",
]
