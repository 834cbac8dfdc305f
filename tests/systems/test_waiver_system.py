from fair_loot.state import State
from fair_loot.systems.waiver import waiver_system
from fair_loot.types import SHOOT_ACTIONS, ButtonAction
from tests.test_utils import make_player


def _pressed(held: dict):
    return lambda action, controller: action in held.get(controller, set())


def test_all_shoot_buttons_raise_flag() -> None:
    a, b = make_player(0), make_player(1)
    state, waived = waiver_system(State(), [a, b], _pressed({0: set(SHOOT_ACTIONS)}))
    assert waived == [a]
    assert state.room.offer_items[a.player_index] is True
    assert b.player_index not in state.room.offer_items


def test_partial_input_does_nothing() -> None:
    a = make_player(0)
    held = {0: {ButtonAction.SHOOT_LEFT, ButtonAction.SHOOT_RIGHT, ButtonAction.SHOOT_UP}}
    state, waived = waiver_system(State(), [a], _pressed(held))
    assert waived == []
    assert state == State()


def test_flag_is_sticky_and_reported_once() -> None:
    a = make_player(0)
    state, waived = waiver_system(State(), [a], _pressed({0: set(SHOOT_ACTIONS)}))
    assert waived == [a]
    state, waived = waiver_system(state, [a], _pressed({0: set(SHOOT_ACTIONS)}))
    assert waived == []
    state, waived = waiver_system(state, [a], _pressed({}))
    assert state.room.offer_items[a.player_index] is True


def test_unsafe_player_cannot_waive() -> None:
    ghost = make_player(0, coop_ghost=True)
    state, waived = waiver_system(State(), [ghost], _pressed({0: set(SHOOT_ACTIONS)}))
    assert waived == []
    assert len(state.room.offer_items) == 0


def test_custom_actions() -> None:
    a = make_player(0)
    state, waived = waiver_system(
        State(), [a], _pressed({0: {ButtonAction.BOMB}}), (ButtonAction.BOMB,)
    )
    assert waived == [a]
