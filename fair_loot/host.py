"""Host engine contract.

The arbiter never talks to a game engine directly. Whatever embeds it
implements :class:`GameHost` to enumerate entities, answer input queries,
project positions and perform the presentation side effects.
"""

from typing import List, Protocol

from fair_loot.components import Color, Pedestal, Player, Position
from fair_loot.types import ButtonAction, RoomType


class GameHost(Protocol):
    def players(self) -> List[Player]:
        """Full player roster, in roster order."""
        ...

    def collectibles(self) -> List[Pedestal]:
        """Collectible pedestals currently in the room."""
        ...

    def room_type(self) -> RoomType: ...

    def is_action_pressed(self, action: ButtonAction, controller_index: int) -> bool: ...

    def world_to_screen(self, position: Position) -> Position: ...

    def render_text(self, text: str, x: float, y: float, color: Color) -> None: ...

    def animate_happy(self, player: Player) -> None: ...

    def animate_sad(self, player: Player) -> None: ...
