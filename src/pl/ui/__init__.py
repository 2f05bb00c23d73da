"""UI module."""

from .input_buffer import QueryBuffer
from .panel_builder import calculate_visible_range, format_scroll_indicator

__all__ = [
    "QueryBuffer",
    "calculate_visible_range",
    "format_scroll_indicator",
]
