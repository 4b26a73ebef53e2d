"""Shared test fixtures."""

from __future__ import annotations

import pytest

from longshadow.base import IconBase
from longshadow.scene import Scene
from longshadow.shapes.outline import Outline
from longshadow.shapes.style import Color


# Sample icon SVGs

SQUARE_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M 7 7 L 17 7 L 17 17 L 7 17 Z" fill="#ffffff"/>
</svg>'''

RING_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M 4 4 L 20 4 L 20 20 L 4 20 Z M 8 8 L 16 8 L 16 16 L 8 16 Z" fill="#ffffff"/>
</svg>'''

CIRCLE_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="6" fill="#ffffff"/>
</svg>'''

HOME_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

TRIANGLE_ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <polygon points="50,10 90,90 10,90" fill="#ffffff"/>
</svg>'''

NO_SHAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <line x1="0" y1="0" x2="24" y2="24" stroke="#000000"/>
</svg>'''


def make_scene(icon: Outline, base_outline: Outline) -> tuple[Scene, IconBase]:
    """Scene with the base at the back and the icon above it."""
    scene = Scene()
    base_outline.fill = Color(red=0.2, green=0.6, blue=0.9)
    icon.fill = Color(red=1.0, green=1.0, blue=1.0)
    scene.add(base_outline)
    scene.add(icon)
    return scene, IconBase(base_outline)


@pytest.fixture
def unit_square() -> Outline:
    return Outline.rectangle(0, 0, 1, 1)


@pytest.fixture
def square_icon() -> Outline:
    return Outline.rectangle(0, 0, 100, 100)


@pytest.fixture
def unit_square_scene(unit_square: Outline) -> tuple[Scene, IconBase, Outline]:
    # Base reaches well past the sweep (which ends near x = y = 2.56)
    scene, base = make_scene(unit_square, Outline.rectangle(-5, -5, 15, 15))
    return scene, base, unit_square
