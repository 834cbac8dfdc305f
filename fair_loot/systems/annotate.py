"""Annotation system.

Produces the on-screen hints drawn above each contested pedestal: the
category label and one ``J<n>`` tag per participant, green when that player
may take the item right now and red when they have to wait.

Hidden (question-mark) pedestals are never annotated. Whether a pedestal is
hidden is recorded the first time it is seen in the room and not
re-evaluated afterwards, so an item revealed later stays unannotated.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Tuple

from fair_loot.components import Pedestal, Player, Position, TextAnnotation
from fair_loot.config import ArbiterConfig
from fair_loot.state import State
from fair_loot.systems.classify import collectible_group
from fair_loot.systems.ranking import front_runner, has_waived, sorted_players
from fair_loot.types import RoomType


def is_hidden(state: State, pedestal: Pedestal) -> Tuple[State, bool]:
    """Return whether ``pedestal`` is treated as hidden this room."""
    hidden_items = state.room.hidden_items
    if pedestal.index in hidden_items:
        return state, hidden_items[pedestal.index]
    hidden_items = hidden_items.set(pedestal.index, pedestal.blind)
    return replace(state, room=replace(state.room, hidden_items=hidden_items)), pedestal.blind


def annotation_system(
    state: State,
    pedestal: Pedestal,
    players: Iterable[Player],
    room_type: RoomType,
    screen_pos: Position,
    config: ArbiterConfig,
    rng: random.Random,
) -> Tuple[State, List[TextAnnotation]]:
    """Build the annotations for one eligible pedestal.

    Args:
        state: Current arbiter state.
        pedestal: Eligible pedestal to annotate.
        players: Full roster.
        room_type: Kind of the current room.
        screen_pos: Screen position of the pedestal.
        config: Layout and colors.
        rng: Source for tie-break priorities not drawn yet.

    Returns:
        Tuple[State, List[TextAnnotation]]: Updated state and the
        annotations to draw (empty for hidden pedestals).
    """
    state, hidden = is_hidden(state, pedestal)
    if hidden:
        return state, []

    category = collectible_group(pedestal, room_type)
    annotations = [
        TextAnnotation(category, screen_pos.x, screen_pos.y, config.label_color)
    ]

    state, ranking = sorted_players(state, players, category, rng)
    first = front_runner(ranking)
    if first is None:
        return state, annotations

    first_waived = has_waived(state, first)
    roster = sorted((player for player, _ in ranking), key=lambda p: p.index)
    for offset, player in enumerate(roster):
        available = player.player_index == first.player_index or first_waived
        annotations.append(
            TextAnnotation(
                f"J{player.index + 1}",
                screen_pos.x + offset * config.tag_spacing,
                screen_pos.y + config.tag_offset_y,
                config.available_color if available else config.waiting_color,
            )
        )
    return state, annotations
