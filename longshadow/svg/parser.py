"""SVG parser: regex tag scanning plus fontTools path data.

Turns icon markup into shapes the shadow engine can sweep. Only the first
drawable element is used: an icon is one silhouette.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from shapely.geometry import Polygon

from longshadow.errors import SvgParseError
from longshadow.shapes.outline import CompoundOutline, Outline, Shape
from longshadow.shapes.pathdata import SAMPLES_PER_CURVE, parse_contours
from longshadow.shapes.point import Bounds

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_SHAPE_TAG_RE = re.compile(r"<(path|rect|polygon|circle)\b[^>]*/?\s*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'(\w[\w-]*)\s*=\s*"([^"]*)"')
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_CIRCLE_VERTICES = 64


def parse_view_box(svg_text: str) -> Bounds | None:
    """Return the viewBox as Bounds, or None when absent or malformed."""
    match = _VIEWBOX_RE.search(svg_text)
    if not match:
        return None
    parts = _NUMBER_RE.findall(match.group(1))
    if len(parts) != 4:
        return None
    x, y, width, height = (float(p) for p in parts)
    return Bounds(x, y, width, height)


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract key attributes from an SVG tag string."""
    return {m.group(1): m.group(2) for m in _ATTR_RE.finditer(tag_text)}


def shape_from_path_d(d: str, samples_per_curve: int = SAMPLES_PER_CURVE) -> Shape:
    """Build an icon shape from path data.

    A single subpath stays an editable Outline. Several subpaths are combined
    with the even-odd rule, so inner contours cut holes.
    """
    outlines = [Outline(contour) for contour in parse_contours(d, samples_per_curve)]
    outlines = [o for o in outlines if len(o) >= 3]
    if not outlines:
        return Outline()
    if len(outlines) == 1:
        return outlines[0]

    geometry = Polygon()
    for outline in outlines:
        geometry = geometry.symmetric_difference(outline.geometry)
    logger.debug("Combined %d subpaths with even-odd rule", len(outlines))
    return CompoundOutline(geometry)


def _rect_outline(attrs: dict[str, str]) -> Outline:
    x = float(attrs.get("x", 0))
    y = float(attrs.get("y", 0))
    return Outline.rectangle(x, y, float(attrs["width"]), float(attrs["height"]))


def _polygon_outline(attrs: dict[str, str]) -> Outline:
    numbers = [float(n) for n in _NUMBER_RE.findall(attrs["points"])]
    if len(numbers) % 2:
        raise SvgParseError("polygon points must come in x,y pairs")
    return Outline(list(zip(numbers[::2], numbers[1::2])))


def _circle_outline(attrs: dict[str, str]) -> Outline:
    cx, cy, r = float(attrs.get("cx", 0)), float(attrs.get("cy", 0)), float(attrs["r"])
    angles = np.linspace(0, 2 * np.pi, _CIRCLE_VERTICES, endpoint=False)
    return Outline(np.column_stack([cx + r * np.cos(angles), cy + r * np.sin(angles)]))


def outline_from_svg(svg_text: str) -> Shape:
    """Return the first drawable element of an SVG document as a shape."""
    for match in _SHAPE_TAG_RE.finditer(svg_text):
        tag = match.group(1).lower()
        attrs = _extract_attrs(match.group(0))
        try:
            if tag == "path":
                shape = shape_from_path_d(attrs["d"])
            elif tag == "rect":
                shape = _rect_outline(attrs)
            elif tag == "polygon":
                shape = _polygon_outline(attrs)
            else:
                shape = _circle_outline(attrs)
        except (KeyError, ValueError) as e:
            logger.warning("Skipping unusable <%s>: %s", tag, e)
            continue
        if shape.is_empty:
            logger.warning("Skipping empty <%s>", tag)
            continue
        logger.info("Parsed icon from <%s>, bounds %s", tag, shape.bounds)
        return shape

    raise SvgParseError("No path, rect, polygon or circle with a usable outline")
