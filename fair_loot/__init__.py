"""fair_loot: fair item distribution for co-op runs.

Tracks how many items of each fairness category every player has taken and
vetoes pickups by anyone but the player with the fewest, until that player
waives their turn. See :class:`fair_loot.arbiter.Arbiter` for the entry point.
"""

from fair_loot.arbiter import Arbiter
from fair_loot.config import ArbiterConfig
from fair_loot.state import RoomState, RunState, State

__all__ = ["Arbiter", "ArbiterConfig", "RoomState", "RunState", "State"]
