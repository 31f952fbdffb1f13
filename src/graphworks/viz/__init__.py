from .draw import base_layout, draw_spanning_tree

__all__ = [
    "base_layout",
    "draw_spanning_tree",
]
