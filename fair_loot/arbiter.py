"""Arbiter application context.

:class:`Arbiter` owns the arbiter :class:`State`, its configuration, the
random source for tie-break priorities and the :class:`GameHost` it is
embedded in. The host forwards its engine callbacks to the matching
methods; the arbiter runs the pure systems, keeps the resulting state and
performs the presentation side effects on the host.

Usage::

    arbiter = Arbiter(host)
    arbiter.post_game_started(is_continued=False)
    arbiter.post_render()                     # every rendered frame
    arbiter.pre_pickup_collision(pedestal, player)
    arbiter.pre_item_pickup(player, picking_up)
    arbiter.post_new_room()
"""

import logging
import random
from typing import List, Optional

from fair_loot.components import Pedestal, PickingUpItem, Player
from fair_loot.commands import execute_cmd
from fair_loot.config import ArbiterConfig
from fair_loot.frame import FrameResult, post_render
from fair_loot.host import GameHost
from fair_loot.persistence import load_json, save_json
from fair_loot.state import State, new_room
from fair_loot.systems.acquire import item_pickup_system
from fair_loot.systems.collision import pickup_collision_system
from fair_loot.types import Decision

logger = logging.getLogger(__name__)


class Arbiter:
    """Fairness arbiter bound to one host.

    Attributes:
        host: Engine the arbiter reads from and draws on.
        config: Behavior and layout settings.
        rng: Source of tie-break priorities.
        state: Current arbiter state.
    """

    def __init__(
        self,
        host: GameHost,
        config: Optional[ArbiterConfig] = None,
        rng: Optional[random.Random] = None,
        state: Optional[State] = None,
    ) -> None:
        self.host = host
        self.config = config or ArbiterConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = state or State()
        if self.config.debug:
            logging.getLogger("fair_loot").setLevel(logging.DEBUG)
        logger.info("%s initialized.", self.config.mod_name)

    def post_render(self) -> FrameResult:
        """Per-frame callback: update waivers, scan and annotate pedestals."""
        self.state, result = post_render(self.state, self.host, self.config, self.rng)
        for player in result.waived_players:
            logger.debug("Player %s waived priority", player.player_index)
            self.host.animate_happy(player)
        for annotation in result.annotations:
            self.host.render_text(
                annotation.text, annotation.x, annotation.y, annotation.color
            )
        return result

    def pre_pickup_collision(
        self, pedestal: Pedestal, collider: Optional[Player]
    ) -> Optional[bool]:
        """Collision callback.

        Returns:
            Optional[bool]: ``False`` to veto the pickup, ``None`` to let the
            engine proceed as usual.
        """
        self.state, decision = pickup_collision_system(
            self.state,
            pedestal,
            collider,
            self.host.players(),
            self.host.room_type(),
            self.rng,
        )
        if decision == Decision.ALLOW or collider is None:
            return None

        if collider.extra_animation_finished:
            self.host.animate_sad(collider)
        return False

    def pre_item_pickup(self, player: Player, picking_up: PickingUpItem) -> None:
        """Acquisition callback: credit ``player`` with the item's category."""
        self.state = item_pickup_system(self.state, player, picking_up)

    def post_new_room(self) -> None:
        """Room transition: drop the room observations."""
        self.state = new_room(self.state)

    def post_game_started(self, is_continued: bool) -> None:
        """Run start: clear the ledger unless an existing run is continued."""
        if is_continued:
            self.state = new_room(self.state)
        else:
            self.state = State()

    def execute_cmd(self, command: str, parameters: str) -> List[str]:
        """Console callback; output lines are also logged."""
        lines = execute_cmd(self.state, command, parameters, self.config.command)
        for line in lines:
            logger.info(line)
        return lines

    def save(self) -> str:
        """Serialize the run-scoped state for the host's save facility."""
        return save_json(self.state, self.config.save_key)

    def load(self, data: str) -> None:
        """Restore state produced by :meth:`save`.

        Raises:
            ValueError: If ``data`` is not valid save data.
        """
        self.state = load_json(data, self.config.save_key)
