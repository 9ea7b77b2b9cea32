from .layouts import base_layout, layout_line_graph_from_base
from .draw import clique_colors, draw_analysis

__all__ = [
    "base_layout",
    "layout_line_graph_from_base",
    "clique_colors",
    "draw_analysis",
]
