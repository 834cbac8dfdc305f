"""Per-frame orchestration.

Runs once per rendered frame, in this order:

1. ``waiver_system`` updates waiver flags from held inputs.
2. Every collectible pedestal is checked for eligibility; eligible ones get
    their category cached in the room state (so that a later acquisition can
    be credited) and, when more than one participant is present, annotated.

Collision decisions taken later in the frame therefore already see this
frame's waivers.
"""

import random
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from fair_loot.components import Player, TextAnnotation
from fair_loot.config import ArbiterConfig
from fair_loot.host import GameHost
from fair_loot.state import State
from fair_loot.systems.annotate import annotation_system
from fair_loot.systems.classify import collectible_group
from fair_loot.systems.eligibility import is_collectible_interesting
from fair_loot.systems.players import safe_players
from fair_loot.systems.waiver import waiver_system


@dataclass(frozen=True)
class FrameResult:
    """Side effects requested by a frame.

    Attributes:
        annotations: Text to draw this frame.
        waived_players: Players who waived their turn this frame.
    """

    annotations: List[TextAnnotation] = field(default_factory=list)
    waived_players: List[Player] = field(default_factory=list)


def post_render(
    state: State, host: GameHost, config: ArbiterConfig, rng: random.Random
) -> Tuple[State, FrameResult]:
    """Advance the arbiter by one rendered frame.

    Args:
        state: Arbiter state before the frame.
        host: Engine queried for players, pedestals, inputs and projection.
        config: Waiver actions and annotation layout.
        rng: Source for tie-break priorities not drawn yet.

    Returns:
        Tuple[State, FrameResult]: State after the frame and the requested
        presentation side effects.
    """
    players = host.players()
    state, waived = waiver_system(
        state, players, host.is_action_pressed, config.waiver_actions
    )

    room_type = host.room_type()
    contested = len(safe_players(players)) > 1
    annotations: List[TextAnnotation] = []
    for pedestal in host.collectibles():
        if not is_collectible_interesting(pedestal):
            continue

        category = collectible_group(pedestal, room_type)
        if state.room.item_groups.get(pedestal.sub_type) != category:
            item_groups = state.room.item_groups.set(pedestal.sub_type, category)
            state = replace(state, room=replace(state.room, item_groups=item_groups))

        if contested:
            screen_pos = host.world_to_screen(pedestal.position)
            state, pedestal_annotations = annotation_system(
                state, pedestal, players, room_type, screen_pos, config, rng
            )
            annotations.extend(pedestal_annotations)

    return state, FrameResult(annotations=annotations, waived_players=waived)
