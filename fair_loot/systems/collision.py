"""Pickup collision arbitration.

Decides whether a player touching a collectible may take it. The item is
never consumed or moved here: a ``BLOCK`` decision only vetoes this
collision and the pedestal stays in place for the next attempt.
"""

import random
from typing import Iterable, Optional, Tuple

from fair_loot.components import Pedestal, Player
from fair_loot.state import State
from fair_loot.systems.classify import collectible_group
from fair_loot.systems.eligibility import is_collectible_interesting
from fair_loot.systems.players import is_safe_player
from fair_loot.systems.ranking import front_runner, has_waived, sorted_players
from fair_loot.types import Decision, RoomType


def pickup_collision_system(
    state: State,
    pedestal: Pedestal,
    collider: Optional[Player],
    players: Iterable[Player],
    room_type: RoomType,
    rng: random.Random,
) -> Tuple[State, Decision]:
    """Arbitrate a collision between ``collider`` and ``pedestal``.

    Arguments:
        state:
            Current arbiter state.
        pedestal:
            Collectible being touched.
        collider:
            Player touching it, or None when the collider is not a player.
        players:
            Full roster used to rank participants.
        room_type:
            Kind of the current room.
        rng:
            Source for tie-break priorities not drawn yet.

    Returns:
        Tuple[State, Decision]
            Updated state and ``BLOCK`` only if the item is eligible, the
            collider is a participant who is not the front-runner and the
            front-runner has not waived; ``ALLOW`` otherwise.
    """
    if collider is None or not is_safe_player(collider):
        return state, Decision.ALLOW
    if not is_collectible_interesting(pedestal):
        return state, Decision.ALLOW

    category = collectible_group(pedestal, room_type)
    state, ranking = sorted_players(state, players, category, rng)
    first = front_runner(ranking)
    if first is None:
        return state, Decision.ALLOW

    if collider.player_index == first.player_index or has_waived(state, first):
        return state, Decision.ALLOW
    return state, Decision.BLOCK
