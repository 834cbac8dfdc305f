"""Save data for the run-scoped ledger.

The host's save facility stores opaque strings under a scope key. Only the
ledger is written: room observations are rebuilt by scanning after a room is
(re)entered. JSON object keys are strings, so player indices are restored to
integers on load.
"""

import json
from typing import Any, Dict, Mapping

from pyrsistent import freeze, thaw

from fair_loot.state import RoomState, RunState, State

SAVE_VERSION = 1


def dump_state(state: State) -> Dict[str, Any]:
    """Return a JSON-compatible snapshot of the run scope."""
    return {
        "version": SAVE_VERSION,
        "run": {
            "item_counts": {
                str(player): thaw(counts)
                for player, counts in state.run.item_counts.items()
            },
            "item_priorities": {
                str(player): thaw(priorities)
                for player, priorities in state.run.item_priorities.items()
            },
        },
    }


def _load_store(store: Any, value_type: type) -> Any:
    if not isinstance(store, Mapping):
        raise ValueError(f"Expected a mapping, got {type(store).__name__}")
    loaded: Dict[int, Dict[str, Any]] = {}
    for player, values in store.items():
        if not isinstance(values, Mapping):
            raise ValueError(f"Expected a mapping for player {player}")
        if any(isinstance(value, bool) for value in values.values()):
            raise ValueError(f"Invalid ledger entry for player {player}")
        try:
            loaded[int(player)] = {
                str(category): value_type(value) for category, value in values.items()
            }
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid ledger entry for player {player}") from exc
    return freeze(loaded)


def load_state(data: Mapping[str, Any]) -> State:
    """Rebuild a :class:`State` from :func:`dump_state` output.

    Raises:
        ValueError: If ``data`` is not a snapshot of a supported version.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a mapping, got {type(data).__name__}")
    if data.get("version") != SAVE_VERSION:
        raise ValueError(f"Unsupported save version: {data.get('version')}")
    run = data.get("run")
    if not isinstance(run, Mapping):
        raise ValueError("Save data has no run scope")
    return State(
        run=RunState(
            item_counts=_load_store(run.get("item_counts", {}), int),
            item_priorities=_load_store(run.get("item_priorities", {}), float),
        ),
        room=RoomState(),
    )


def save_json(state: State, key: str = "main") -> str:
    """Serialize the run scope under ``key``."""
    return json.dumps({key: dump_state(state)}, sort_keys=True)


def load_json(data: str, key: str = "main") -> State:
    """Inverse of :func:`save_json`.

    Raises:
        ValueError: On malformed JSON or a missing ``key`` scope.
    """
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError("Save data is not valid JSON") from exc
    if not isinstance(payload, Mapping) or key not in payload:
        raise ValueError(f"Save data has no '{key}' scope")
    return load_state(payload[key])
