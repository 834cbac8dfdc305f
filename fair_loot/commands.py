"""Console diagnostics.

``ltmg itemCounts``, ``ltmg itemPlayerPriorities`` and ``ltmg itemGroups``
dump the ledger and the room's category cache as text lines.
"""

from typing import Any, List, Mapping

from fair_loot.state import State

WRONG_PARAMETER = "wrong parameter"


def map_to_string(values: Mapping[Any, Any]) -> str:
    """Render a mapping as ``key: value, key: value``."""
    return ", ".join(f"{key}: {value}" for key, value in values.items())


def _dump_per_player(store: Mapping[Any, Mapping[Any, Any]]) -> List[str]:
    lines: List[str] = []
    for player_index, values in store.items():
        lines.append(f"- player {player_index}:")
        lines.append(map_to_string(values))
    return lines


def execute_cmd(state: State, command: str, parameters: str, name: str = "ltmg") -> List[str]:
    """Answer a console command.

    Returns:
        List[str]: Output lines; empty when ``command`` is not ours.
    """
    if command != name:
        return []
    if parameters == "itemCounts":
        return _dump_per_player(state.run.item_counts)
    if parameters == "itemPlayerPriorities":
        return _dump_per_player(state.run.item_priorities)
    if parameters == "itemGroups":
        return [map_to_string(state.room.item_groups)]
    return [WRONG_PARAMETER]
