"""Text annotation component.

The rendering contract between the arbiter and the host: a piece of text at
a screen position with an RGBA color (channels in ``[0, 1]``).
"""

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[float, float, float, float]


@dataclass(frozen=True)
class TextAnnotation:
    text: str
    x: float
    y: float
    color: Color
