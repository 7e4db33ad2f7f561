#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/ast/__init__.py
"""Editor document tree model and its JSON codec."""

from docnorm.ast.nodes import JsonValue, Node
from docnorm.ast.serialization import dict_to_node, json_to_node, node_to_dict, node_to_json

__all__ = [
    "JsonValue",
    "Node",
    "dict_to_node",
    "json_to_node",
    "node_to_dict",
    "node_to_json",
]
