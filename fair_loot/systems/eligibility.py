"""Eligibility filter: which pedestals are subject to arbitration."""

from fair_loot.components import Pedestal
from fair_loot.types import COLLECTIBLE_NULL, PASSIVE_ITEM_TYPES


def is_collectible_interesting(pedestal: Pedestal) -> bool:
    """Return True if taking ``pedestal`` should be arbitrated.

    Empty pedestals, non-passive items and negative-price specials (devil
    deal and key-gated display items) are left to the game.
    """
    return (
        pedestal.sub_type != COLLECTIBLE_NULL
        and pedestal.item_type in PASSIVE_ITEM_TYPES
        and pedestal.price >= 0
    )
