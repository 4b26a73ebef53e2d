"""Write standalone SVG frames from stacked shapes."""

from __future__ import annotations

from typing import Sequence

from longshadow.config import settings
from longshadow.shapes.outline import Shape
from longshadow.shapes.point import Bounds
from longshadow.shapes.style import Color, LinearGradient


def _num(value: float) -> str:
    return f"{value:.6g}"


def _fit_view_box(shapes: Sequence[Shape]) -> Bounds:
    extents = [s.bounds for s in shapes if not s.is_empty]
    if not extents:
        return Bounds(0.0, 0.0, 1.0, 1.0)
    xmin = min(b.x for b in extents)
    ymin = min(b.y for b in extents)
    xmax = max(b.x + b.width for b in extents)
    ymax = max(b.y + b.height for b in extents)
    return Bounds(xmin, ymin, max(xmax - xmin, 1e-9), max(ymax - ymin, 1e-9))


def gradient_def(gradient: LinearGradient, gradient_id: str) -> str:
    """<linearGradient> in user space with one <stop> per gradient stop."""
    (x1, y1), (x2, y2) = gradient.origin, gradient.destination
    lines = [
        f'    <linearGradient id="{gradient_id}" gradientUnits="userSpaceOnUse"'
        f' x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}">'
    ]
    for stop in gradient.stops:
        lines.append(
            f'      <stop offset="{_num(stop.offset)}" stop-color="{stop.color.hex}"'
            f' stop-opacity="{_num(stop.color.alpha)}" />'
        )
    lines.append("    </linearGradient>")
    return "\n".join(lines)


def _fill_attrs(shape: Shape, gradient_ids: dict[int, str]) -> str:
    fill = shape.fill
    if isinstance(fill, LinearGradient):
        return f'fill="url(#{gradient_ids[id(shape)]})"'
    if isinstance(fill, Color):
        return f'fill="{fill.hex}" fill-opacity="{_num(fill.alpha)}"'
    return 'fill="none" stroke="#000000"'


def render_scene(
    shapes: Sequence[Shape],
    view_box: Bounds | None = None,
    print_width: float | None = None,
) -> str:
    """Generate SVG markup for shapes, back-most first."""
    visible = [s for s in shapes if not s.disposed and not s.is_empty]
    box = view_box or _fit_view_box(visible)
    width = print_width or settings.svg_print_width
    height = width * box.height / box.width if box.width else width

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{_num(box.x)} {_num(box.y)} {_num(box.width)} {_num(box.height)}"'
        f' width="{_num(width)}" height="{_num(height)}" xmlns="http://www.w3.org/2000/svg">',
    ]

    gradient_ids: dict[int, str] = {}
    defs: list[str] = []
    for shape in visible:
        if isinstance(shape.fill, LinearGradient):
            gradient_ids[id(shape)] = f"gradient-{len(gradient_ids)}"
            defs.append(gradient_def(shape.fill, gradient_ids[id(shape)]))
    if defs:
        lines.append("  <defs>")
        lines.extend(defs)
        lines.append("  </defs>")

    for shape in visible:
        lines.append(f'  <path d="{shape.path_data}" fill-rule="evenodd" {_fill_attrs(shape, gradient_ids)} />')

    lines.append("</svg>")
    return "\n".join(lines)
