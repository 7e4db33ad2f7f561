#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/transforms/heading.py
"""Heading level normalization.

Every heading leaves normalization with an ``attrs`` mapping whose
``level`` lies in [1, 6]. Headings without attrs get ``{"level": 2}``.
A level that is missing, not an integer (``"2"``, ``2.5``, ``true``) or
outside the signed 64-bit range counts as the default level; this coercion
is kept for compatibility with documents saved by older editors and is
logged rather than rejected.
"""

from __future__ import annotations

import logging
from typing import Any

from docnorm.ast.nodes import JsonValue
from docnorm.constants import HEADING_LEVEL_ATTR, MAX_INTEGER_LEVEL, MIN_INTEGER_LEVEL
from docnorm.options import FormatterOptions

logger = logging.getLogger(__name__)


def _is_integer_level(value: Any) -> bool:
    # bool is an int subclass but true/false are not levels
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return MIN_INTEGER_LEVEL <= value <= MAX_INTEGER_LEVEL


def clamp_heading_level(level: int, options: FormatterOptions | None = None) -> int:
    """Clamp a heading level into the configured range.

    Parameters
    ----------
    level : int
        Requested level
    options : FormatterOptions, optional
        Supplies the bounds; defaults to [1, 6]

    Returns
    -------
    int
        Level within ``[min_heading_level, max_heading_level]``

    Examples
    --------
    >>> [clamp_heading_level(n) for n in (-5, 0, 1, 6, 7, 100)]
    [1, 1, 1, 6, 6, 6]

    """
    options = options or FormatterOptions()
    return max(options.min_heading_level, min(options.max_heading_level, level))


def normalize_heading_attrs(attrs: JsonValue, options: FormatterOptions | None = None) -> JsonValue:
    """Return heading attrs with a valid ``level``.

    Parameters
    ----------
    attrs : JsonValue
        The heading's current attrs, or None when absent
    options : FormatterOptions, optional
        Supplies the default level and clamp bounds

    Returns
    -------
    JsonValue
        A new mapping with ``level`` clamped and other keys unchanged.
        Attrs that are present but not a mapping are returned as-is.

    """
    options = options or FormatterOptions()

    if attrs is None:
        return {HEADING_LEVEL_ATTR: options.default_heading_level}

    if not isinstance(attrs, dict):
        logger.debug("Heading attrs are %s, not an object; leaving unchanged", type(attrs).__name__)
        return attrs

    raw_level = attrs.get(HEADING_LEVEL_ATTR)
    if _is_integer_level(raw_level):
        level = raw_level
    else:
        level = options.default_heading_level
        if HEADING_LEVEL_ATTR in attrs:
            log = logger.warning if options.warn_on_coerced_level else logger.debug
            log("Heading level %r is not an integer; using default level %d", raw_level, level)

    normalized = dict(attrs)
    normalized[HEADING_LEVEL_ATTR] = clamp_heading_level(level, options)
    return normalized
