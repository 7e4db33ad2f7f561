#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/api.py
"""Public entry points for formatting editor documents.

:func:`format_document` takes the JSON text an editor saves and returns its
canonical form. :func:`format_json_document` does the same for an
already-decoded mapping and :func:`format_node` for an in-memory tree.

The canonical form is a fixed point: formatting it again returns it
unchanged.

Examples
--------
    >>> from docnorm import format_document
    >>> format_document('{"type":"doc","content":[{"type":"heading","content":[{"type":"text","text":"Hi  there"}]}]}')
    '{"type":"doc","content":[{"type":"heading","content":[{"type":"text","text":"Hi there"}],"attrs":{"level":2}}]}'

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from docnorm.ast.nodes import Node
from docnorm.ast.serialization import dict_to_node, json_to_node, node_to_dict, node_to_json
from docnorm.constants import FORMATTER_VERSION, NODE_TYPE_DOC
from docnorm.exceptions import ParseError, SerializationError, ValidationError
from docnorm.options import FormatterOptions
from docnorm.transforms.processor import ContentProcessor

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Return the formatter version string.

    Returns
    -------
    str
        Semantic version, e.g. ``"1.0.0"``

    """
    return FORMATTER_VERSION


def _validate_root(node: Node) -> None:
    if node.type != NODE_TYPE_DOC:
        raise ValidationError(
            f"Input must be a '{NODE_TYPE_DOC}' type, got '{node.type}'",
            parameter_name="type",
            parameter_value=node.type,
        )


def format_node(document: Node, options: FormatterOptions | None = None) -> Node:
    """Normalize a ``doc`` node tree.

    Parameters
    ----------
    document : Node
        Root node; must have type ``doc``
    options : FormatterOptions, optional
        Formatting options

    Returns
    -------
    Node
        A new normalized tree. ``document`` is not modified.

    Raises
    ------
    ValidationError
        If the root is not a ``doc`` node
    DepthExceededError
        If ``options.max_depth`` is set and exceeded

    """
    _validate_root(document)
    if document.content is None:
        return document.with_changes()

    processor = ContentProcessor(options)
    return document.with_changes(content=processor.process(document.content))


def format_json_document(document: Mapping[str, Any], options: FormatterOptions | None = None) -> dict[str, Any]:
    """Normalize an already-decoded JSON document.

    Parameters
    ----------
    document : Mapping[str, Any]
        Decoded document object
    options : FormatterOptions, optional
        Formatting options

    Returns
    -------
    dict
        The canonical document as a fresh mapping

    Raises
    ------
    ParseError
        If ``document`` does not follow the node grammar or nests too deep
        to decode
    ValidationError
        If the root is not a ``doc`` node or nests too deep to normalize
    DepthExceededError
        If ``options.max_depth`` is set and exceeded
    SerializationError
        If the normalized tree nests too deep to encode

    """
    try:
        root = dict_to_node(document)
    except RecursionError as e:
        raise ParseError(
            "Document nesting too deep to decode", parsing_stage="node_decoding", original_error=e
        ) from e

    formatted = format_node(root, options)
    try:
        return node_to_dict(formatted)
    except RecursionError as e:
        raise SerializationError("Document nesting too deep to encode", original_error=e) from e


def format_document(document: Union[str, bytes], options: FormatterOptions | None = None) -> str:
    """Normalize a JSON-encoded editor document.

    Parameters
    ----------
    document : str or bytes
        JSON text of a ``doc`` node; bytes must be UTF-8
    options : FormatterOptions, optional
        Formatting options, including output indentation

    Returns
    -------
    str
        JSON text of the canonical document

    Raises
    ------
    ParseError
        If the input is malformed JSON or does not follow the node grammar
    ValidationError
        If the root is not a ``doc`` node
    DepthExceededError
        If ``options.max_depth`` is set and exceeded
    SerializationError
        If the normalized tree cannot be encoded

    """
    options = options or FormatterOptions()
    root = json_to_node(document)
    formatted = format_node(root, options)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Formatted document: %d nodes in, %d nodes out",
            sum(1 for _ in root.iter_nodes()),
            sum(1 for _ in formatted.iter_nodes()),
        )
    return node_to_json(formatted, indent=options.indent, ensure_ascii=options.ensure_ascii)
