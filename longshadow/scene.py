"""Scene: the ordered stack of drawn shapes and its view.

Index 0 is the back-most shape. A shape belongs to at most one scene; moving it
into a new slot detaches it from wherever it was before.
"""

from __future__ import annotations

import logging

from longshadow.shapes.outline import Shape
from longshadow.shapes.point import Bounds
from longshadow.svg.serializer import render_scene

logger = logging.getLogger(__name__)


class Scene:
    """Stacking order of shapes plus the redraw operation."""

    def __init__(self, view_box: Bounds | None = None) -> None:
        self._shapes: list[Shape] = []
        # Fitted to the drawn shapes when None
        self.view_box = view_box
        self.last_frame: str = ""
        self.frame_count: int = 0

    @property
    def shapes(self) -> list[Shape]:
        return list(self._shapes)

    def __contains__(self, shape: Shape) -> bool:
        return any(s is shape for s in self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def index_of(self, shape: Shape) -> int:
        for i, s in enumerate(self._shapes):
            if s is shape:
                return i
        raise ValueError(f"{type(shape).__name__} is not part of this scene")

    def add(self, shape: Shape) -> Shape:
        """Put shape on top of the stack."""
        shape._check_alive()
        self._release(shape)
        self._shapes.append(shape)
        shape.scene = self
        return shape

    def insert_below(self, shape: Shape, reference: Shape) -> None:
        """Put shape directly beneath reference."""
        shape._check_alive()
        if shape is reference:
            raise ValueError("A shape cannot be placed below itself")
        self.index_of(reference)
        self._release(shape)
        self._shapes.insert(self.index_of(reference), shape)
        shape.scene = self

    def replace(self, old: Shape, new: Shape) -> None:
        """Swap new into old's slot. old is detached but stays alive."""
        new._check_alive()
        if old is new:
            return
        self.index_of(old)
        self._release(new)
        index = self.index_of(old)
        self._shapes[index] = new
        new.scene = self
        old.scene = None

    def detach(self, shape: Shape) -> None:
        del self._shapes[self.index_of(shape)]
        shape.scene = None

    def _release(self, shape: Shape) -> None:
        if shape.scene is not None:
            shape.scene.detach(shape)

    def draw(self) -> str:
        """Redraw the view: render a fresh frame and keep it as last_frame."""
        self.last_frame = render_scene(self._shapes, self.view_box)
        self.frame_count += 1
        logger.debug("Drew frame %d with %d shapes", self.frame_count, len(self._shapes))
        return self.last_frame
