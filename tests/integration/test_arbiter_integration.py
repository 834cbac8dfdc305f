import logging

from fair_loot.arbiter import Arbiter
from fair_loot.components import PickingUpItem
from fair_loot.config import GREEN, RED, ArbiterConfig
from fair_loot.types import SHOOT_ACTIONS, ItemType, PedestalType, RoomType
from tests.test_utils import FakeHost, FixedRandom, make_pedestal, make_player


def _two_player_arbiter() -> tuple[Arbiter, FakeHost]:
    a, b = make_player(0), make_player(1)
    host = FakeHost(roster=[a, b], pedestals=[make_pedestal(sub_type=5)])
    # A draws the lower priority and is the front-runner on ties.
    return Arbiter(host, rng=FixedRandom(0.1, 0.9)), host


def test_frame_caches_category_and_draws_annotations() -> None:
    arbiter, host = _two_player_arbiter()
    arbiter.post_render()
    assert arbiter.state.room.item_groups[5] == "TREASURE"
    assert [(t[0], t[3]) for t in host.texts] == [
        ("TREASURE", (1.0, 1.0, 1.0, 1.0)),
        ("J1", GREEN),
        ("J2", RED),
    ]
    # world_to_screen doubles coordinates in the fake host
    assert host.texts[0][1:3] == (20.0, 40.0)


def test_single_player_gets_no_annotations_but_category_is_cached() -> None:
    host = FakeHost(roster=[make_player(0)], pedestals=[make_pedestal(sub_type=5)])
    arbiter = Arbiter(host)
    arbiter.post_render()
    assert host.texts == []
    assert arbiter.state.room.item_groups[5] == "TREASURE"


def test_ineligible_pedestal_is_not_cached() -> None:
    host = FakeHost(
        roster=[make_player(0), make_player(1)],
        pedestals=[make_pedestal(sub_type=6, price=-1)],
    )
    arbiter = Arbiter(host)
    arbiter.post_render()
    assert 6 not in arbiter.state.room.item_groups
    assert host.texts == []


def test_full_turn_cycle() -> None:
    arbiter, host = _two_player_arbiter()
    a, b = host.roster
    pedestal = host.pedestals[0]
    arbiter.post_render()

    assert arbiter.pre_pickup_collision(pedestal, b) is False
    assert host.sad == [b.player_index]
    assert arbiter.pre_pickup_collision(pedestal, a) is None

    arbiter.pre_item_pickup(a, PickingUpItem(ItemType.PASSIVE, 5))
    assert arbiter.state.run.item_counts[a.player_index]["TREASURE"] == 1

    # Now B has fewer treasure items and becomes the front-runner.
    assert arbiter.pre_pickup_collision(pedestal, a) is False
    assert arbiter.pre_pickup_collision(pedestal, b) is None


def test_sad_animation_waits_for_previous_animation() -> None:
    arbiter, host = _two_player_arbiter()
    busy_b = make_player(1, extra_animation_finished=False)
    assert arbiter.pre_pickup_collision(host.pedestals[0], busy_b) is False
    assert host.sad == []


def test_waiver_frame_lets_others_take() -> None:
    arbiter, host = _two_player_arbiter()
    a, b = host.roster
    host.pressed[a.controller_index] = set(SHOOT_ACTIONS)
    arbiter.post_render()
    assert host.happy == [a.player_index]
    assert arbiter.pre_pickup_collision(host.pedestals[0], b) is None

    host.pressed.clear()
    arbiter.post_render()
    assert host.happy == [a.player_index]
    assert arbiter.pre_pickup_collision(host.pedestals[0], b) is None

    arbiter.post_new_room()
    assert arbiter.pre_pickup_collision(host.pedestals[0], b) is False


def test_room_transition_keeps_ledger() -> None:
    arbiter, host = _two_player_arbiter()
    a = host.roster[0]
    arbiter.post_render()
    arbiter.pre_item_pickup(a, PickingUpItem(ItemType.PASSIVE, 5))
    arbiter.post_new_room()
    assert len(arbiter.state.room.item_groups) == 0
    assert arbiter.state.run.item_counts[a.player_index]["TREASURE"] == 1

    # Item kind not scanned in the new room: nothing is credited.
    arbiter.pre_item_pickup(a, PickingUpItem(ItemType.FAMILIAR, 5))
    assert arbiter.state.run.item_counts[a.player_index]["TREASURE"] == 1


def test_game_start_resets_ledger_unless_continued() -> None:
    arbiter, host = _two_player_arbiter()
    a = host.roster[0]
    arbiter.post_render()
    arbiter.pre_item_pickup(a, PickingUpItem(ItemType.PASSIVE, 5))

    arbiter.post_game_started(is_continued=True)
    assert arbiter.state.run.item_counts[a.player_index]["TREASURE"] == 1
    arbiter.post_game_started(is_continued=False)
    assert len(arbiter.state.run.item_counts) == 0


def test_special_container_category() -> None:
    a, b = make_player(0), make_player(1)
    chest = make_pedestal(index="c", sub_type=8, pedestal_type=PedestalType.ETERNAL_CHEST)
    host = FakeHost(roster=[a, b], pedestals=[chest], room=RoomType.SHOP)
    arbiter = Arbiter(host)
    arbiter.post_render()
    assert arbiter.state.room.item_groups[8] == "LOCKED_CHEST"


def test_save_and_load_round_trip_keeps_ledger_only() -> None:
    arbiter, host = _two_player_arbiter()
    a = host.roster[0]
    arbiter.post_render()
    arbiter.pre_item_pickup(a, PickingUpItem(ItemType.PASSIVE, 5))
    data = arbiter.save()

    restored = Arbiter(host, config=ArbiterConfig(seed=1))
    restored.load(data)
    assert restored.state.run == arbiter.state.run
    assert len(restored.state.room.item_groups) == 0


def test_console_command() -> None:
    arbiter, host = _two_player_arbiter()
    arbiter.post_render()
    assert arbiter.execute_cmd("ltmg", "itemGroups") == ["5: TREASURE"]
    assert arbiter.execute_cmd("ltmg", "nope") == ["wrong parameter"]
    assert arbiter.execute_cmd("other", "itemGroups") == []


def test_debug_config_enables_debug_logging() -> None:
    package_logger = logging.getLogger("fair_loot")
    previous = package_logger.level
    try:
        package_logger.setLevel(logging.WARNING)
        Arbiter(FakeHost(), config=ArbiterConfig(debug=False))
        assert package_logger.level == logging.WARNING
        Arbiter(FakeHost(), config=ArbiterConfig(debug=True))
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("fair_loot.systems.acquire").isEnabledFor(logging.DEBUG)
    finally:
        package_logger.setLevel(previous)
