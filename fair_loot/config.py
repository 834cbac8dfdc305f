"""Arbiter configuration.

A single frozen dataclass with defaults matching the stock behavior. Hosts
that read settings from a file can build one with
:meth:`ArbiterConfig.from_mapping`.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple

from fair_loot.components import Color
from fair_loot.types import SHOOT_ACTIONS, ButtonAction

MOD_NAME = "Less talking. More gaming."

GREEN: Color = (0.0, 1.0, 0.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)
WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ArbiterConfig:
    """Settings for an :class:`fair_loot.arbiter.Arbiter`.

    Attributes:
        mod_name: Name announced on initialization.
        command: Console command answering diagnostic dumps.
        save_key: Scope name under which the run state is saved.
        debug: Log arbitration details at DEBUG level.
        seed: Seed for tie-break priorities (None for entropy).
        waiver_actions: Actions to hold together to waive priority.
        tag_spacing: Horizontal distance between player tags, in pixels.
        tag_offset_y: Vertical distance from label to player tags.
        label_color: Color of the category label.
        available_color: Tag color for players who may take the item.
        waiting_color: Tag color for players who must wait.
    """

    mod_name: str = MOD_NAME
    command: str = "ltmg"
    save_key: str = "main"
    debug: bool = False
    seed: Optional[int] = None
    waiver_actions: Tuple[ButtonAction, ...] = SHOOT_ACTIONS
    tag_spacing: int = 16
    tag_offset_y: int = 12
    label_color: Color = WHITE
    available_color: Color = GREEN
    waiting_color: Color = RED

    def __post_init__(self) -> None:
        if not self.waiver_actions:
            raise ValueError("waiver_actions must not be empty")
        if self.tag_spacing <= 0:
            raise ValueError(f"tag_spacing must be positive: {self.tag_spacing}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ArbiterConfig":
        """Build a config from parsed settings, ignoring unknown keys.

        ``waiver_actions`` may be given as action names (any case); colors as
        any 4-item sequence.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in values.items() if key in known}
        if "waiver_actions" in kwargs:
            kwargs["waiver_actions"] = tuple(
                ButtonAction(str(action).lower())
                for action in kwargs["waiver_actions"]
            )
        for key in ("label_color", "available_color", "waiting_color"):
            if key in kwargs:
                kwargs[key] = tuple(float(channel) for channel in kwargs[key])
        return cls(**kwargs)
