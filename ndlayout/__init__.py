"""Multidimensional extents with static and dynamic sizes, and strided layout mappings."""

__version__ = "0.1.0"
__all__ = ["static_array", "layout_stride"]