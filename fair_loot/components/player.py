"""Player component.

Snapshot of the attributes of a player entity that participant selection and
arbitration read. ``index`` is the transient entity index used for on-screen
tags; ``player_index`` is the stable identity used as the ledger key.
"""

from dataclasses import dataclass

from fair_loot.types import (
    BABY_SKIN_UNASSIGNED,
    EntityType,
    PlayerIndex,
    PlayerVariant,
)


@dataclass(frozen=True)
class Player:
    """Player entity view.

    Attributes:
        index: Entity index in the current room (rendered as ``J<index+1>``).
        player_index: Stable participant identity across frames and rooms.
        controller_index: Input device polled for this player.
        entity_type: Entity kind; only ``PLAYER`` entities are arbitrated.
        variant: ``COOP_BABY`` marks an AI/co-op companion sharing the type.
        dead: True while the player is dead.
        main_twin_index: Entity index of the primary half of a twin pair
            (equal to ``index`` for characters without a twin).
        baby_skin: Cosmetic skin marker, ``BABY_SKIN_UNASSIGNED`` when unset.
        coop_ghost: True for spectral co-op ghosts.
        extra_animation_finished: False while a reaction animation plays.
    """

    index: int
    player_index: PlayerIndex
    controller_index: int = 0
    entity_type: EntityType = EntityType.PLAYER
    variant: PlayerVariant = PlayerVariant.PLAYER
    dead: bool = False
    main_twin_index: int | None = None
    baby_skin: int = BABY_SKIN_UNASSIGNED
    coop_ghost: bool = False
    extra_animation_finished: bool = True

    @property
    def main_twin(self) -> int:
        """Entity index of the twin this entity belongs to."""
        return self.index if self.main_twin_index is None else self.main_twin_index
