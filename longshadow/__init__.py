"""longshadow: long-shadow outlines for flat icons, cut to an icon base."""

from longshadow.base import BaseSurface, IconBase
from longshadow.engine.shadow import ShadowBuilder, ShadowState
from longshadow.errors import (
    DisposedShapeError,
    GeometryError,
    LongShadowError,
    ShadowStateError,
    SvgParseError,
)
from longshadow.scene import Scene
from longshadow.shapes import CompoundOutline, Outline, Point

__version__ = "0.1.0"

__all__ = [
    "BaseSurface",
    "CompoundOutline",
    "DisposedShapeError",
    "GeometryError",
    "IconBase",
    "LongShadowError",
    "Outline",
    "Point",
    "Scene",
    "ShadowBuilder",
    "ShadowState",
    "ShadowStateError",
    "SvgParseError",
]
