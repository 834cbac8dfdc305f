"""Pedestal component.

A collectible pickup lying in the room: the item on it, what spawned it,
its price and whether the item is shown as a question mark.
"""

from dataclasses import dataclass

from fair_loot.components.position import Position
from fair_loot.types import (
    CollectibleIndex,
    CollectibleType,
    ItemType,
    PedestalType,
)


@dataclass(frozen=True)
class Pedestal:
    """Collectible pedestal view.

    Attributes:
        index: Stable per-room identity of this pedestal.
        sub_type: Item kind currently offered.
        item_type: Host classification of the item (passive, active...).
        pedestal_type: Container or machine the item came from.
        price: Shop price; negative values mark display-only specials.
        blind: True when the item is hidden (question-mark sprite).
        position: World position of the pedestal.
    """

    index: CollectibleIndex
    sub_type: CollectibleType
    item_type: ItemType = ItemType.PASSIVE
    pedestal_type: PedestalType = PedestalType.DEFAULT
    price: int = 0
    blind: bool = False
    position: Position = Position(0.0, 0.0)
