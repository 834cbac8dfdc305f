"""Category classifier.

Buckets a collectible into a fairness *category* from the container it was
spawned from and the room it sits in. The item itself never matters: two
treasure-room items are the same kind of luck regardless of what they are.

Rules, first match wins:

1. Locked, eternal and bomb chests collapse into ``LOCKED_CHEST``.
2. A mega chest counts as if it stood in a treasure room.
3. Items from one of the nine special containers are labeled with the
    container name, whatever the room.
4. Room aliases fold shop-like, treasure-like and angel-like rooms together.
5. Items in one of the twelve notable rooms are labeled with the room name.
6. Everything else is ``DEFAULT``.
"""

from typing import Mapping

from fair_loot.components import Pedestal
from fair_loot.types import CategoryLabel, PedestalType, RoomType

DEFAULT_CATEGORY: CategoryLabel = "DEFAULT"

RESTRICTED_CHESTS = frozenset(
    {
        PedestalType.LOCKED_CHEST,
        PedestalType.ETERNAL_CHEST,
        PedestalType.BOMB_CHEST,
    }
)

SPECIAL_PEDESTALS = frozenset(
    {
        PedestalType.LOCKED_CHEST,
        PedestalType.WOODEN_CHEST,
        PedestalType.OLD_CHEST,
        PedestalType.MOMS_CHEST,
        PedestalType.MOMS_DRESSING_TABLE,
        PedestalType.RED_CHEST,
        PedestalType.SLOT_MACHINE,
        PedestalType.BLOOD_DONATION_MACHINE,
        PedestalType.FORTUNE_TELLING_MACHINE,
    }
)

ROOM_ALIASES: Mapping[RoomType, RoomType] = {
    RoomType.BLACK_MARKET: RoomType.SHOP,
    RoomType.DUNGEON: RoomType.TREASURE,
    RoomType.CHALLENGE: RoomType.TREASURE,
    RoomType.BOSS_RUSH: RoomType.TREASURE,
    RoomType.SACRIFICE: RoomType.ANGEL,
}

NOTABLE_ROOMS = frozenset(
    {
        RoomType.SHOP,
        RoomType.ERROR,
        RoomType.BOSS,
        RoomType.MINI_BOSS,
        RoomType.SECRET,
        RoomType.CURSE,
        RoomType.TREASURE,
        RoomType.ANGEL,
        RoomType.LIBRARY,
        RoomType.DEVIL,
        RoomType.PLANETARIUM,
        RoomType.ULTRA_SECRET,
    }
)


def normalize_pedestal(pedestal_type: PedestalType) -> PedestalType:
    """Collapse restricted chest variants into ``LOCKED_CHEST``."""
    if pedestal_type in RESTRICTED_CHESTS:
        return PedestalType.LOCKED_CHEST
    return pedestal_type


def normalize_room(room_type: RoomType) -> RoomType:
    """Fold room aliases into their canonical room kind."""
    return ROOM_ALIASES.get(room_type, room_type)


def classify(pedestal_type: PedestalType, room_type: RoomType) -> CategoryLabel:
    """Return the fairness category of an item.

    Args:
        pedestal_type: Container or machine the item came from.
        room_type: Kind of the room the item is in.

    Returns:
        CategoryLabel: Container name, room name or ``"DEFAULT"``.
    """
    pedestal_type = normalize_pedestal(pedestal_type)
    if pedestal_type == PedestalType.MEGA_CHEST:
        room_type = RoomType.TREASURE

    if pedestal_type in SPECIAL_PEDESTALS:
        return pedestal_type.name

    room_type = normalize_room(room_type)
    if room_type in NOTABLE_ROOMS:
        return room_type.name

    return DEFAULT_CATEGORY


def collectible_group(pedestal: Pedestal, room_type: RoomType) -> CategoryLabel:
    """Return the fairness category of the item lying on ``pedestal``."""
    return classify(pedestal.pedestal_type, room_type)
