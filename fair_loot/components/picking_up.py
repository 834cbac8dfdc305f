"""Item being picked up (queued above the player's head)."""

from dataclasses import dataclass

from fair_loot.types import CollectibleType, ItemType


@dataclass(frozen=True)
class PickingUpItem:
    """Item a player is in the middle of acquiring.

    Attributes:
        item_type: Broad kind of the acquired thing.
        sub_type: Item kind; matches ``Pedestal.sub_type`` for collectibles.
    """

    item_type: ItemType
    sub_type: CollectibleType
