"""Fairness ledger helpers.

Get-or-insert operations on the nested persistent maps of
:class:`fair_loot.state.RunState`. Reads that materialize a default return
``(new_run_state, value)``; callers must keep the returned state so that a
random priority is drawn at most once per (player, category) key.
"""

import logging
import random
from dataclasses import replace
from typing import Callable, Tuple, TypeVar

from pyrsistent import pmap
from pyrsistent.typing import PMap

from fair_loot.state import RunState
from fair_loot.types import CategoryLabel, PlayerIndex

logger = logging.getLogger(__name__)

V = TypeVar("V")

LedgerStore = PMap[PlayerIndex, PMap[CategoryLabel, V]]


def get_or_insert(
    store: LedgerStore[V],
    player: PlayerIndex,
    category: CategoryLabel,
    factory: Callable[[], V],
) -> Tuple[LedgerStore[V], V]:
    """Return ``store[player][category]``, inserting ``factory()`` if absent.

    ``factory`` is only invoked on a miss.
    """
    inner: PMap[CategoryLabel, V] | None = store.get(player)
    if inner is not None and category in inner:
        return store, inner[category]
    if inner is None:
        inner = pmap()
    value = factory()
    return store.set(player, inner.set(category, value)), value


def get_count(
    run: RunState, player: PlayerIndex, category: CategoryLabel
) -> Tuple[RunState, int]:
    """Return the number of ``category`` items ``player`` collected (default 0)."""
    item_counts, count = get_or_insert(run.item_counts, player, category, int)
    if item_counts is run.item_counts:
        return run, count
    return replace(run, item_counts=item_counts), count


def increment_count(
    run: RunState, player: PlayerIndex, category: CategoryLabel
) -> RunState:
    """Return a ledger with ``player``'s ``category`` count increased by one."""
    run, previous = get_count(run, player, category)
    inner = run.item_counts[player]
    logger.debug(
        "Incremented %s to %d for player %s", category, previous + 1, player
    )
    return replace(
        run,
        item_counts=run.item_counts.set(player, inner.set(category, previous + 1)),
    )


def get_priority(
    run: RunState,
    player: PlayerIndex,
    category: CategoryLabel,
    rng: random.Random,
) -> Tuple[RunState, float]:
    """Return ``player``'s tie-break priority for ``category``.

    A fresh ``rng.random()`` value in ``[0, 1)`` is drawn and stored the first
    time the pair is queried; later calls return the stored value.
    """
    item_priorities, priority = get_or_insert(
        run.item_priorities, player, category, rng.random
    )
    if item_priorities is run.item_priorities:
        return run, priority
    return replace(run, item_priorities=item_priorities), priority
