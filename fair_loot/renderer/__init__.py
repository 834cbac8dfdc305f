"""Rendering subpackage.

The arbiter itself only emits :class:`fair_loot.components.TextAnnotation`
values; hosts draw them with their own text facility. For screenshots and
debugging, :mod:`fair_loot.renderer.overlay` draws the same annotations onto
a Pillow image.
"""
