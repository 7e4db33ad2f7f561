#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/transforms/processor.py
"""Recursive normalization and filtering of sibling node lists.

Each node in a list goes through the same pipeline, in order:

1. Text nodes have their spaces collapsed. A text node that is empty (or
   has no text at all) is dropped; any other text node is kept. Text nodes
   never recurse and are never filtered.
2. Heading nodes have their attrs normalized before their children are
   visited.
3. Container nodes with ``content`` have it replaced by the processed list.
4. The node is kept only if :func:`~docnorm.transforms.validity.is_valid_node`
   accepts it, so a heading whose only text child was dropped in step 3 is
   dropped itself.

Survivors keep their original relative order. The input nodes are never
mutated; processing builds new nodes.

Examples
--------
    >>> from docnorm.ast import Node
    >>> nodes = [
    ...     Node(type="heading", content=[Node(type="text", text="")]),
    ...     Node(type="paragraph", content=[Node(type="text", text="a   b")]),
    ... ]
    >>> result = process_content(nodes)
    >>> [n.type for n in result]
    ['paragraph']
    >>> result[0].content[0].text
    'a b'

"""

from __future__ import annotations

import logging
from typing import Any

from docnorm.ast.nodes import Node
from docnorm.constants import NODE_TYPE_HEADING
from docnorm.exceptions import DepthExceededError, ValidationError
from docnorm.options import FormatterOptions
from docnorm.transforms.heading import normalize_heading_attrs
from docnorm.transforms.text import collapse_spaces
from docnorm.transforms.validity import is_valid_node

logger = logging.getLogger(__name__)


class ContentProcessor:
    """Normalize and filter lists of sibling nodes.

    Parameters
    ----------
    options : FormatterOptions, optional
        Heading level and depth settings

    Attributes
    ----------
    visited : int
        Nodes examined by the most recent :meth:`process` call
    dropped : int
        Nodes removed by the most recent :meth:`process` call

    """

    def __init__(self, options: FormatterOptions | None = None):
        """Initialize the processor with options."""
        self.options = options or FormatterOptions()
        self.visited = 0
        self.dropped = 0

    def process(self, nodes: list[Node], depth: int = 2) -> list[Node]:
        """Process a list of sibling nodes.

        Parameters
        ----------
        nodes : list of Node
            Siblings to process
        depth : int, default = 2
            Nesting depth of ``nodes``; the children of a ``doc`` root are
            at depth 2

        Returns
        -------
        list of Node
            New list holding the surviving, normalized nodes

        Raises
        ------
        DepthExceededError
            If ``max_depth`` is set and the tree nests deeper
        ValidationError
            If the tree nests deeper than the interpreter can recurse

        """
        self.visited = 0
        self.dropped = 0
        try:
            result = self._process(nodes, depth)
        except RecursionError as e:
            raise ValidationError(
                "Document nesting too deep to normalize", parameter_name="content", original_error=e
            ) from e
        logger.debug("Processed %d nodes, dropped %d", self.visited, self.dropped)
        return result

    def _process(self, nodes: list[Node], depth: int) -> list[Node]:
        max_depth = self.options.max_depth
        if nodes and max_depth is not None and depth > max_depth:
            raise DepthExceededError(max_depth=max_depth, depth=depth)

        survivors = []
        for node in nodes:
            self.visited += 1
            processed = self._process_node(node, depth)
            if processed is None:
                self.dropped += 1
            else:
                survivors.append(processed)
        return survivors

    def _process_node(self, node: Node, depth: int) -> Node | None:
        if node.is_text:
            if not node.text:
                return None
            text = collapse_spaces(node.text)
            return node.with_changes(text=text)

        changes: dict[str, Any] = {}
        if node.type == NODE_TYPE_HEADING:
            changes["attrs"] = normalize_heading_attrs(node.attrs, self.options)
        if node.content is not None:
            changes["content"] = self._process(node.content, depth + 1)

        processed = node.with_changes(**changes)
        if not is_valid_node(processed):
            logger.debug("Dropping invalid %s node at depth %d", processed.type, depth)
            return None
        return processed


def process_content(nodes: list[Node], options: FormatterOptions | None = None) -> list[Node]:
    """Normalize and filter a list of sibling nodes.

    Parameters
    ----------
    nodes : list of Node
        Siblings to process
    options : FormatterOptions, optional
        Heading level and depth settings

    Returns
    -------
    list of Node
        Surviving nodes in their original order

    """
    return ContentProcessor(options).process(nodes)
