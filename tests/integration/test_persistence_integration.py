import json

import pytest

from fair_loot.persistence import dump_state, load_json, load_state, save_json
from tests.test_utils import make_ledger_state


def test_dump_uses_string_keys() -> None:
    state = make_ledger_state({1: {"SHOP": 2}}, {1: {"SHOP": 0.25}})
    data = dump_state(state)
    assert data["run"]["item_counts"] == {"1": {"SHOP": 2}}
    assert data["run"]["item_priorities"] == {"1": {"SHOP": 0.25}}
    json.dumps(data)


def test_load_restores_integer_players() -> None:
    state = make_ledger_state({1: {"SHOP": 2}}, {1: {"SHOP": 0.25}}, {1: True})
    restored = load_json(save_json(state))
    assert restored.run == state.run
    assert len(restored.room.offer_items) == 0


def test_custom_scope_key() -> None:
    state = make_ledger_state({3: {"BOSS": 1}})
    data = save_json(state, key="fair")
    assert load_json(data, key="fair").run == state.run
    with pytest.raises(ValueError):
        load_json(data, key="main")


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"version": 99, "run": {}},
        {"version": 1},
        {"version": 1, "run": {"item_counts": []}},
        {"version": 1, "run": {"item_counts": {"x": {"SHOP": 1}}}},
        {"version": 1, "run": {"item_counts": {"1": {"SHOP": "many"}}}},
        [],
        {"version": 1, "run": {"item_counts": {"1": {"SHOP": True}}}},
        {"version": 1, "run": {"item_priorities": {"1": {"SHOP": False}}}},
    ],
)
def test_malformed_save_data(data: object) -> None:
    with pytest.raises(ValueError):
        load_state(data)


def test_invalid_json() -> None:
    with pytest.raises(ValueError):
        load_json("{not json")


def test_non_mapping_scope_is_rejected() -> None:
    with pytest.raises(ValueError):
        load_json('{"main": []}')


def test_boolean_count_is_rejected() -> None:
    data = '{"main": {"version": 1, "run": {"item_counts": {"1": {"SHOP": true}}}}}'
    with pytest.raises(ValueError):
        load_json(data)
