#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/transforms/text.py
"""Space collapsing for text node content."""

from __future__ import annotations

import re

# Two or more U+0020 only; tabs, newlines and other whitespace are left alone
_SPACE_RUN_PATTERN = re.compile(r" {2,}")


def collapse_spaces(text: str) -> str:
    """Collapse every run of two or more spaces to a single space.

    Only the literal space character is collapsed. Leading and trailing
    spaces are kept (a leading run shrinks to one space, it is not trimmed),
    so an all-space string becomes ``" "`` and ``""`` stays ``""``.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Text with space runs collapsed

    Examples
    --------
    >>> collapse_spaces("a   b\\tc")
    'a b\\tc'
    >>> collapse_spaces("   ")
    ' '

    """
    return _SPACE_RUN_PATTERN.sub(" ", text)
