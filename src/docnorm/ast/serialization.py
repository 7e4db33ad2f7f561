#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/ast/serialization.py
"""JSON serialization and deserialization for editor document nodes.

This module converts between the JSON wire encoding of an editor document
and the in-memory :class:`~docnorm.ast.nodes.Node` tree.

The wire grammar:

- A node is a JSON object with a required string ``type``.
- ``content``, when present, is an array of node objects.
- ``text``, when present, is a string.
- ``marks``, when present, is an array of arbitrary JSON values.
- ``attrs``, when present, is any JSON value.
- A field whose value is ``null`` is treated as absent.
- Any other key is ignored, so it does not survive a round trip.

Encoding emits fields in the order ``type, content, text, attrs, marks`` and
omits absent ones.

Examples
--------
Decode a document and encode it back:

    >>> from docnorm.ast.serialization import json_to_node, node_to_json
    >>> doc = json_to_node('{"type": "doc", "content": [{"type": "paragraph"}]}')
    >>> doc.content[0].type
    'paragraph'
    >>> node_to_json(doc)
    '{"type":"doc","content":[{"type":"paragraph"}]}'

"""

from __future__ import annotations

import copy
import json
from typing import Any, Union

from docnorm.ast.nodes import JsonValue, Node
from docnorm.constants import (
    COMPACT_JSON_SEPARATORS,
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    NODE_FIELD_ORDER,
)
from docnorm.exceptions import ParseError, SerializationError


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard ``NaN``/``Infinity`` literals the json module accepts."""
    raise ValueError(f"Invalid JSON literal: {name}")


def _describe(value: Any) -> str:
    """Name a decoded JSON value's type for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def dict_to_node(data: Any, path: str = "$") -> Node:
    """Build a Node tree from a decoded JSON value.

    Parameters
    ----------
    data : Any
        Decoded JSON value expected to be a node object
    path : str, default = "$"
        Location of ``data`` inside the document, used in error messages

    Returns
    -------
    Node
        The decoded node and its descendants

    Raises
    ------
    ParseError
        If ``data`` does not follow the node grammar

    """
    if not isinstance(data, dict):
        raise ParseError(f"Expected a node object at {path}, got {_describe(data)}", parsing_stage="node_decoding")

    node_type = data.get("type")
    if node_type is None:
        raise ParseError(f"Missing required field 'type' at {path}", parsing_stage="node_decoding")
    if not isinstance(node_type, str):
        raise ParseError(
            f"Field 'type' at {path} must be a string, got {_describe(node_type)}", parsing_stage="node_decoding"
        )

    content = data.get("content")
    if content is not None:
        if not isinstance(content, list):
            raise ParseError(
                f"Field 'content' at {path} must be an array, got {_describe(content)}",
                parsing_stage="node_decoding",
            )
        content = [dict_to_node(child, f"{path}.content[{index}]") for index, child in enumerate(content)]

    text = data.get("text")
    if text is not None and not isinstance(text, str):
        raise ParseError(
            f"Field 'text' at {path} must be a string, got {_describe(text)}", parsing_stage="node_decoding"
        )

    marks = data.get("marks")
    if marks is not None and not isinstance(marks, list):
        raise ParseError(
            f"Field 'marks' at {path} must be an array, got {_describe(marks)}", parsing_stage="node_decoding"
        )

    # Decoded nodes own their payloads; nothing aliases the caller's data
    return Node(
        type=node_type,
        content=content,
        text=text,
        attrs=copy.deepcopy(data.get("attrs")),
        marks=copy.deepcopy(marks),
    )


def node_to_dict(node: Node) -> dict[str, JsonValue]:
    """Convert a Node tree to plain JSON-compatible dictionaries.

    Parameters
    ----------
    node : Node
        Root of the tree to convert

    Returns
    -------
    dict
        Mapping with absent fields omitted, in wire field order

    """
    result: dict[str, JsonValue] = {}
    for name in NODE_FIELD_ORDER:
        value = getattr(node, name)
        if value is None:
            continue
        if name == "content":
            value = [node_to_dict(child) for child in value]
        result[name] = value
    return result


def json_to_node(json_input: Union[str, bytes]) -> Node:
    """Decode a JSON document into a Node tree.

    Parameters
    ----------
    json_input : str or bytes
        JSON text; bytes are decoded as UTF-8

    Returns
    -------
    Node
        The decoded root node

    Raises
    ------
    ParseError
        If the input is not valid UTF-8, not valid JSON, or does not follow
        the node grammar

    """
    try:
        if isinstance(json_input, (bytes, bytearray)):
            json_input = bytes(json_input).decode("utf-8")
        data = json.loads(json_input, parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid UTF-8: {e}", parsing_stage="json_decoding", original_error=e) from e
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", parsing_stage="json_decoding", original_error=e) from e
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid JSON: {e}", parsing_stage="json_decoding", original_error=e) from e
    except RecursionError as e:
        raise ParseError(
            "Invalid JSON: nesting too deep to decode", parsing_stage="json_decoding", original_error=e
        ) from e

    try:
        return dict_to_node(data)
    except RecursionError as e:
        raise ParseError(
            "Document nesting too deep to decode", parsing_stage="node_decoding", original_error=e
        ) from e


def node_to_json(
    node: Node,
    indent: int | None = DEFAULT_JSON_INDENT,
    ensure_ascii: bool = DEFAULT_JSON_ENSURE_ASCII,
) -> str:
    """Encode a Node tree as JSON text.

    Parameters
    ----------
    node : Node
        Root of the tree to encode
    indent : int or None, default = None
        Indentation for pretty-printed output; None produces compact output
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters

    Returns
    -------
    str
        JSON text

    Raises
    ------
    SerializationError
        If the tree holds a value JSON cannot represent

    """
    separators = COMPACT_JSON_SEPARATORS if indent is None else None
    try:
        return json.dumps(
            node_to_dict(node),
            indent=indent,
            separators=separators,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Serialization error: {e}", original_error=e) from e
