"""Drawable 2D shapes: points, outlines and their fills."""

from longshadow.shapes.outline import CompoundOutline, Outline, Shape
from longshadow.shapes.point import Bounds, Point
from longshadow.shapes.style import Color, GradientStop, LinearGradient

__all__ = [
    "Bounds",
    "Color",
    "CompoundOutline",
    "GradientStop",
    "LinearGradient",
    "Outline",
    "Point",
    "Shape",
]
