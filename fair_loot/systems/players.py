"""Participant selection.

Only real, living, primary player characters take part in arbitration.
Co-op babies, secondary twins (e.g. the second half of a split character),
skin-overridden duplicates and co-op ghosts are ignored everywhere: they
neither rank, nor get blocked, nor accumulate counts.
"""

from typing import Iterable, List

from fair_loot.components import Player
from fair_loot.types import BABY_SKIN_UNASSIGNED, EntityType, PlayerVariant


def is_safe_player(player: Player) -> bool:
    """Return True if ``player`` is a genuine participant."""
    return (
        player.entity_type == EntityType.PLAYER
        and player.variant == PlayerVariant.PLAYER
        and not player.dead
        and player.main_twin == player.index
        and player.baby_skin == BABY_SKIN_UNASSIGNED
        and not player.coop_ghost
    )


def safe_players(players: Iterable[Player]) -> List[Player]:
    """Return the participants in roster order."""
    return [player for player in players if is_safe_player(player)]
