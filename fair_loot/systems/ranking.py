"""Player ranking per fairness category.

Players are ordered by how many items of the category they already hold,
fewest first. Equal counts are ordered by each player's stored random
priority for the category (lowest first), then by ``player_index`` so that
the order stays total even if two priorities collide.

Ranking materializes missing counts and priorities, so it returns the
updated :class:`State` together with the ranking.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from fair_loot.components import Player
from fair_loot.state import State
from fair_loot.systems.players import safe_players
from fair_loot.types import CategoryLabel
from fair_loot.utils.ledger import get_count, get_priority

Ranking = List[Tuple[Player, int]]


def sorted_players(
    state: State,
    players: Iterable[Player],
    category: CategoryLabel,
    rng: random.Random,
) -> Tuple[State, Ranking]:
    """Rank the safe players among ``players`` for ``category``.

    Args:
        state: Current arbiter state.
        players: Full roster, in roster order.
        category: Fairness category of the contested item.
        rng: Source for priorities not drawn yet.

    Returns:
        Tuple[State, Ranking]: Updated state and ``(player, count)`` pairs,
        front-runner first.
    """
    run = state.run
    keyed: List[Tuple[Tuple[int, float, int], Player, int]] = []
    for player in safe_players(players):
        run, count = get_count(run, player.player_index, category)
        run, priority = get_priority(run, player.player_index, category, rng)
        keyed.append(((count, priority, player.player_index), player, count))

    keyed.sort(key=lambda entry: entry[0])
    ranking = [(player, count) for _, player, count in keyed]

    if run is not state.run:
        state = replace(state, run=run)
    return state, ranking


def front_runner(ranking: Ranking) -> Optional[Player]:
    """Return the player entitled to the item, or None for an empty ranking."""
    if not ranking:
        return None
    return ranking[0][0]


def has_waived(state: State, player: Player) -> bool:
    """Return True if ``player`` offered their turn in the current room."""
    return state.room.offer_items.get(player.player_index, False)
