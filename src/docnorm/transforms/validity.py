#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/transforms/validity.py
"""Keep/drop rules applied to a node after its children are processed."""

from __future__ import annotations

from docnorm.ast.nodes import Node
from docnorm.constants import NODE_TYPE_HEADING, NODE_TYPE_IMAGE, NODE_TYPE_PARAGRAPH


def is_valid_node(node: Node) -> bool:
    """Decide whether a processed node survives.

    - ``paragraph``: always kept, even when empty; empty paragraphs are
      vertical spacing in the editor.
    - ``heading``: kept only with non-empty ``content``.
    - ``image``: kept only when ``attrs`` is present (``{}`` counts).
    - anything else: always kept.

    Parameters
    ----------
    node : Node
        Node whose own subtree has already been processed

    Returns
    -------
    bool
        True to keep the node

    """
    if node.type == NODE_TYPE_PARAGRAPH:
        return True
    if node.type == NODE_TYPE_HEADING:
        return bool(node.content)
    if node.type == NODE_TYPE_IMAGE:
        return node.attrs is not None
    return True
