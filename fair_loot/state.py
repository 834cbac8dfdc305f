"""Immutable arbiter ``State``.

The state is split by lifetime:

* :class:`RunState` (the fairness *ledger*) lives for a whole run. It holds
    per-player, per-category pickup counts and the per-player, per-category
    random tie-break priorities.
* :class:`RoomState` (room observations) is rebuilt every time a new room is
    entered. It caches the category computed for each item kind seen in the
    room, the waiver flags raised by players and which pedestals are hidden.

All stores are persistent maps (``pyrsistent.PMap``). Absence of a key means
"default value not yet materialized"; the helpers in
:mod:`fair_loot.utils.ledger` and the systems insert defaults on first read and
return the updated state alongside the value.
"""

from dataclasses import dataclass, field

from pyrsistent import pmap
from pyrsistent.typing import PMap

from fair_loot.types import (
    CategoryLabel,
    CollectibleIndex,
    CollectibleType,
    PlayerIndex,
)


@dataclass(frozen=True)
class RunState:
    """Run-scoped fairness ledger.

    Attributes:
        item_counts: Number of items collected per player and category.
        item_priorities: Tie-break priority in ``[0, 1)`` per player and
            category. Drawn once, never re-rolled.
    """

    item_counts: PMap[PlayerIndex, PMap[CategoryLabel, int]] = field(
        default_factory=pmap
    )
    item_priorities: PMap[PlayerIndex, PMap[CategoryLabel, float]] = field(
        default_factory=pmap
    )


@dataclass(frozen=True)
class RoomState:
    """Room-scoped observations.

    Attributes:
        item_groups: Category of each item kind classified in this room.
        offer_items: Waiver flag per player ("others may go first").
        hidden_items: Whether each pedestal was hidden when first observed.
    """

    item_groups: PMap[CollectibleType, CategoryLabel] = field(default_factory=pmap)
    offer_items: PMap[PlayerIndex, bool] = field(default_factory=pmap)
    hidden_items: PMap[CollectibleIndex, bool] = field(default_factory=pmap)


@dataclass(frozen=True)
class State:
    """Complete arbiter state.

    Attributes:
        run: Ledger surviving room transitions.
        room: Observations reset on each room transition.
    """

    run: RunState = field(default_factory=RunState)
    room: RoomState = field(default_factory=RoomState)


def new_room(state: State) -> State:
    """Return ``state`` with fresh room observations."""
    return State(run=state.run, room=RoomState())

