#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/transforms/__init__.py
"""Normalization rules applied to editor document trees.

- :func:`collapse_spaces` shrinks runs of spaces in text nodes
- :func:`normalize_heading_attrs` clamps heading levels
- :func:`is_valid_node` decides which processed nodes survive
- :class:`ContentProcessor` applies all of the above recursively
"""

from docnorm.transforms.heading import clamp_heading_level, normalize_heading_attrs
from docnorm.transforms.processor import ContentProcessor, process_content
from docnorm.transforms.text import collapse_spaces
from docnorm.transforms.validity import is_valid_node

__all__ = [
    "ContentProcessor",
    "clamp_heading_level",
    "collapse_spaces",
    "is_valid_node",
    "normalize_heading_attrs",
    "process_content",
]
