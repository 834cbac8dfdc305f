"""Common type aliases and enumerations.

The host engine identifies players, collectibles and locations with its own
opaque values. The arbiter only needs them as hashable keys and as labels, so
they are modelled as plain aliases plus string enums whose member *names* are
what ends up in category labels and console dumps.
"""

from enum import StrEnum, auto


PlayerIndex = int
"""Stable identity of a human participant (survives entity re-creation)."""

CollectibleIndex = str
"""Per-room stable identity of a single collectible pedestal."""

CollectibleType = int
"""Item kind of a collectible (which item sits on the pedestal)."""

CategoryLabel = str
"""Fairness bucket produced by the classifier. Open-ended."""

COLLECTIBLE_NULL: CollectibleType = 0


class EntityType(StrEnum):
    """Broad entity kinds the arbiter distinguishes."""

    PLAYER = auto()
    FAMILIAR = auto()
    PICKUP = auto()
    NPC = auto()


class PlayerVariant(StrEnum):
    """Player entity variants (co-op babies share the player entity type)."""

    PLAYER = auto()
    COOP_BABY = auto()


class ItemType(StrEnum):
    """Broad kind of a collectible as reported by the host."""

    NULL = auto()
    PASSIVE = auto()
    TRINKET = auto()
    ACTIVE = auto()
    FAMILIAR = auto()


PASSIVE_ITEM_TYPES = frozenset({ItemType.PASSIVE, ItemType.FAMILIAR})


class ButtonAction(StrEnum):
    """Input actions queried from the host."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SHOOT_LEFT = auto()
    SHOOT_RIGHT = auto()
    SHOOT_UP = auto()
    SHOOT_DOWN = auto()
    BOMB = auto()
    ITEM = auto()


SHOOT_ACTIONS = (
    ButtonAction.SHOOT_LEFT,
    ButtonAction.SHOOT_RIGHT,
    ButtonAction.SHOOT_UP,
    ButtonAction.SHOOT_DOWN,
)


class RoomType(StrEnum):
    """Room kinds a pedestal can be found in."""

    NULL = auto()
    DEFAULT = auto()
    SHOP = auto()
    ERROR = auto()
    TREASURE = auto()
    BOSS = auto()
    MINI_BOSS = auto()
    SECRET = auto()
    SUPER_SECRET = auto()
    ARCADE = auto()
    CURSE = auto()
    CHALLENGE = auto()
    LIBRARY = auto()
    SACRIFICE = auto()
    DEVIL = auto()
    ANGEL = auto()
    DUNGEON = auto()
    BOSS_RUSH = auto()
    CLEAN_BEDROOM = auto()
    DIRTY_BEDROOM = auto()
    VAULT = auto()
    DICE = auto()
    BLACK_MARKET = auto()
    GREED_EXIT = auto()
    PLANETARIUM = auto()
    TELEPORTER = auto()
    TELEPORTER_EXIT = auto()
    SECRET_EXIT = auto()
    BLUE = auto()
    ULTRA_SECRET = auto()


class PedestalType(StrEnum):
    """What a collectible was spawned from (chest, machine, plain pedestal...)."""

    DEFAULT = auto()
    SLOT_MACHINE = auto()
    BLOOD_DONATION_MACHINE = auto()
    FORTUNE_TELLING_MACHINE = auto()
    BEGGAR = auto()
    DEVIL_BEGGAR = auto()
    SHELL_GAME = auto()
    KEY_MASTER = auto()
    DONATION_MACHINE = auto()
    BOMB_BUM = auto()
    RESTOCK_MACHINE = auto()
    GREED_DONATION_MACHINE = auto()
    MOMS_DRESSING_TABLE = auto()
    BATTERY_BUM = auto()
    ROTTEN_BEGGAR = auto()
    HELL_GAME = auto()
    CRANE_GAME = auto()
    LOCKED_CHEST = auto()
    RED_CHEST = auto()
    BOMB_CHEST = auto()
    ETERNAL_CHEST = auto()
    MOMS_CHEST = auto()
    OLD_CHEST = auto()
    WOODEN_CHEST = auto()
    MEGA_CHEST = auto()


class Decision(StrEnum):
    """Outcome of arbitrating a pickup collision."""

    ALLOW = auto()
    BLOCK = auto()


BABY_SKIN_UNASSIGNED = -1
