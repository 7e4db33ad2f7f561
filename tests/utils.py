"""Test utilities for the docnorm test suite.

This module provides small builders for editor documents so tests can
describe trees compactly, plus helpers for round-tripping through JSON.
"""

import json
from typing import Any, Optional


def text(value: Optional[str], marks: Optional[list] = None) -> dict:
    """Build a text node."""
    node: dict[str, Any] = {"type": "text"}
    if value is not None:
        node["text"] = value
    if marks is not None:
        node["marks"] = marks
    return node


def paragraph(*children: dict, content: Optional[list] = None) -> dict:
    """Build a paragraph; with no children and no content, the field is omitted."""
    node: dict[str, Any] = {"type": "paragraph"}
    if children:
        node["content"] = list(children)
    elif content is not None:
        node["content"] = content
    return node


def heading(*children: dict, attrs: Any = None) -> dict:
    """Build a heading with optional attrs."""
    node: dict[str, Any] = {"type": "heading"}
    if children:
        node["content"] = list(children)
    if attrs is not None:
        node["attrs"] = attrs
    return node


def image(attrs: Any = None) -> dict:
    """Build an image node; attrs omitted when None."""
    node: dict[str, Any] = {"type": "image"}
    if attrs is not None:
        node["attrs"] = attrs
    return node


def doc(*children: dict) -> dict:
    """Build a doc root holding the given children."""
    return {"type": "doc", "content": list(children)}


def dumps(document: dict) -> str:
    """Encode a test document as JSON text."""
    return json.dumps(document)


def loads(json_text: str) -> dict:
    """Decode formatter output for structural assertions."""
    return json.loads(json_text)
