"""Acquisition system.

Credits a participant with an item once it is actually picked up. Only
passive items and familiars count. The category is read from the current
room's cache (filled while scanning pedestals each frame) rather than
recomputed, because the pedestal is gone by the time the item is acquired.
"""

import logging
from dataclasses import replace

from fair_loot.components import PickingUpItem, Player
from fair_loot.state import State
from fair_loot.systems.players import is_safe_player
from fair_loot.types import PASSIVE_ITEM_TYPES
from fair_loot.utils.ledger import increment_count

logger = logging.getLogger(__name__)


def item_pickup_system(
    state: State, player: Player, picking_up: PickingUpItem
) -> State:
    """Increment ``player``'s count for the category of the acquired item.

    Unknown item kinds (never scanned in this room) leave the ledger
    unchanged.
    """
    if picking_up.item_type not in PASSIVE_ITEM_TYPES:
        return state
    logger.debug(
        "Player %s-%s picked up %s %s",
        player.index,
        player.player_index,
        picking_up.item_type,
        picking_up.sub_type,
    )
    if not is_safe_player(player):
        return state

    category = state.room.item_groups.get(picking_up.sub_type)
    if category is None:
        logger.debug("Item %s has no known category", picking_up.sub_type)
        return state

    run = increment_count(state.run, player.player_index, category)
    return replace(state, run=run)
