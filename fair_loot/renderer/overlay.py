"""Pillow overlay of text annotations."""

from typing import Iterable, Tuple

from PIL import Image, ImageDraw

from fair_loot.components import Color, TextAnnotation


def to_rgba(color: Color) -> Tuple[int, int, int, int]:
    """Convert ``[0, 1]`` float channels to 8-bit RGBA."""
    r, g, b, a = (max(0, min(255, int(round(channel * 255)))) for channel in color)
    return (r, g, b, a)


def draw_annotations(
    image: Image.Image, annotations: Iterable[TextAnnotation]
) -> Image.Image:
    """Return a copy of ``image`` with ``annotations`` drawn on top.

    Text is composited through a transparent layer so annotation alpha is
    respected; the result is RGBA.
    """
    base = image.convert("RGBA")
    layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    for annotation in annotations:
        draw.text(
            (int(round(annotation.x)), int(round(annotation.y))),
            annotation.text,
            fill=to_rgba(annotation.color),
        )
    return Image.alpha_composite(base, layer)
