#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/ast/nodes.py
"""Node class for editor document representation.

Editor documents are trees of a single node shape. A node's ``type`` tag
selects its meaning; the tags with special normalization rules are ``doc``,
``paragraph``, ``heading``, ``text`` and ``image``. Every other tag is
passed through untouched apart from its children.

A node is either a text node, carrying ``text`` and optional ``marks``, or
a container node, optionally carrying an ordered ``content`` list of child
nodes. ``attrs`` and ``marks`` hold opaque JSON payloads that are never
interpreted except for a heading's ``level``.

Examples
--------
Build a small document by hand:

    >>> from docnorm.ast import Node
    >>> doc = Node(type="doc", content=[
    ...     Node(type="heading", attrs={"level": 1}, content=[Node(type="text", text="Title")]),
    ...     Node(type="paragraph"),
    ... ])
    >>> doc.content[0].content[0].is_text
    True

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, Union

from docnorm.constants import NODE_TYPE_TEXT

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
"""Structured pass-through value: null, boolean, number, string, array or object."""


@dataclass
class Node:
    """A single element of an editor document tree.

    Parameters
    ----------
    type : str
        Type tag selecting the node's semantics
    content : list of Node or None, default = None
        Ordered child nodes (container nodes only)
    text : str or None, default = None
        Literal text (text nodes only)
    attrs : JsonValue, default = None
        Node attributes; usually a mapping of arbitrary keys to JSON values
    marks : list or None, default = None
        Inline formatting annotations (text nodes only)

    """

    type: str
    content: Optional[list[Node]] = None
    text: Optional[str] = None
    attrs: JsonValue = None
    marks: Optional[list[JsonValue]] = None

    @property
    def is_text(self) -> bool:
        """Whether this node is a text leaf."""
        return self.type == NODE_TYPE_TEXT

    def with_changes(self, **changes: Any) -> Node:
        """Return a shallow copy of this node with the given fields replaced."""
        return replace(self, **changes)

    def iter_nodes(self) -> Iterator[Node]:
        """Yield this node and every descendant in document order.

        Yields
        ------
        Node
            Nodes in pre-order

        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.content:
                stack.extend(reversed(node.content))

