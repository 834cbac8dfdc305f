"""Waiver tracker.

A participant holding every waiver action at once (by default all four shoot
directions) offers their turn to the others for the rest of the room. The
flag is sticky: releasing the buttons does not clear it, only entering a new
room does.
"""

from dataclasses import replace
from typing import Callable, Iterable, List, Sequence, Tuple

from fair_loot.components import Player
from fair_loot.state import State
from fair_loot.systems.players import safe_players
from fair_loot.types import ButtonAction, SHOOT_ACTIONS

PressedFn = Callable[[ButtonAction, int], bool]


def waiver_system(
    state: State,
    players: Iterable[Player],
    is_pressed: PressedFn,
    actions: Sequence[ButtonAction] = SHOOT_ACTIONS,
) -> Tuple[State, List[Player]]:
    """Raise waiver flags for participants holding all ``actions``.

    Args:
        state: Current arbiter state.
        players: Full roster.
        is_pressed: ``(action, controller_index) -> bool`` input query.
        actions: Actions that must all be held.

    Returns:
        Tuple[State, List[Player]]: Updated state and the players whose
        flag was raised this frame (they had not waived before).
    """
    offer_items = state.room.offer_items
    newly_waived: List[Player] = []
    for player in safe_players(players):
        if not all(is_pressed(action, player.controller_index) for action in actions):
            continue
        if not offer_items.get(player.player_index, False):
            newly_waived.append(player)
        offer_items = offer_items.set(player.player_index, True)

    if offer_items is state.room.offer_items:
        return state, newly_waived
    return replace(state, room=replace(state.room, offer_items=offer_items)), newly_waived
