"""docnorm - canonical formatting for rich-text editor documents.

docnorm normalizes ProseMirror/TipTap-style JSON documents before they are
saved or re-rendered, so every consumer sees the same minimal, consistent
tree.

Normalization Rules
-------------------
- Runs of two or more spaces in text collapse to one space
- Empty text nodes are removed
- Heading levels are clamped to 1-6; headings without attrs get level 2
- Headings left without content are removed
- Images without attrs are removed
- Paragraphs are always kept, including empty ones
- All other nodes pass through with their children normalized

Examples
--------
Format a saved document:

    >>> from docnorm import format_document
    >>> format_document('{"type":"doc","content":[{"type":"paragraph","content":[{"type":"text","text":"a   b"}]}]}')
    '{"type":"doc","content":[{"type":"paragraph","content":[{"type":"text","text":"a b"}]}]}'

Work with an already-decoded document:

    >>> from docnorm import format_json_document
    >>> format_json_document({"type": "doc", "content": [{"type": "image"}]})
    {'type': 'doc', 'content': []}

"""

from docnorm.api import format_document, format_json_document, format_node, get_version
from docnorm.ast import Node
from docnorm.exceptions import (
    ConfigurationError,
    DepthExceededError,
    DocnormError,
    ParseError,
    SerializationError,
    ValidationError,
)
from docnorm.options import FormatterOptions

__version__ = get_version()

__all__ = [
    "ConfigurationError",
    "DepthExceededError",
    "DocnormError",
    "FormatterOptions",
    "Node",
    "ParseError",
    "SerializationError",
    "ValidationError",
    "__version__",
    "format_document",
    "format_json_document",
    "format_node",
    "get_version",
]
