from .layouts import pinned_positions, position_layout
from .draw import draw_position

__all__ = [
    "pinned_positions",
    "position_layout",
    "draw_position",
]
