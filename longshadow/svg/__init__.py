"""SVG input and output for icons and rendered scenes."""

from longshadow.svg.parser import outline_from_svg, parse_view_box, shape_from_path_d
from longshadow.svg.serializer import render_scene

__all__ = ["outline_from_svg", "parse_view_box", "render_scene", "shape_from_path_d"]
