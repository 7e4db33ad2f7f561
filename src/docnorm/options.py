#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docnorm/options.py
"""Options controlling a normalization pass.

Options are frozen dataclasses so a single instance can be shared between
calls. Every field carries ``help`` metadata, which the CLI uses for its
argument help text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docnorm.constants import (
    DEFAULT_HEADING_LEVEL,
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_WARN_ON_COERCED_LEVEL,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)
from docnorm.exceptions import ConfigurationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class FormatterOptions(CloneFrozenMixin):
    """Configuration for formatting an editor document.

    Parameters
    ----------
    max_depth : int or None, default = None
        Maximum container nesting depth. None leaves depth unbounded;
        deeper documents raise DepthExceededError when set.
    default_heading_level : int, default = 2
        Level given to headings with no attrs or a non-integer level
    min_heading_level : int, default = 1
        Lowest level a heading is clamped to
    max_heading_level : int, default = 6
        Highest level a heading is clamped to
    warn_on_coerced_level : bool, default = False
        Log non-integer heading levels at WARNING instead of DEBUG
    indent : int or None, default = None
        JSON output indentation. None for compact output.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output

    Examples
    --------
    Bound nesting depth and pretty-print output:
        >>> options = FormatterOptions(max_depth=64, indent=2)

    """

    max_depth: int | None = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum container nesting depth (unbounded when unset)", "type": int},
    )
    default_heading_level: int = field(
        default=DEFAULT_HEADING_LEVEL,
        metadata={"help": "Level for headings without a usable level attribute", "type": int},
    )
    min_heading_level: int = field(
        default=MIN_HEADING_LEVEL,
        metadata={"help": "Lowest heading level after clamping", "type": int},
    )
    max_heading_level: int = field(
        default=MAX_HEADING_LEVEL,
        metadata={"help": "Highest heading level after clamping", "type": int},
    )
    warn_on_coerced_level: bool = field(
        default=DEFAULT_WARN_ON_COERCED_LEVEL,
        metadata={"help": "Log non-integer heading levels as warnings"},
    )
    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (compact when unset)", "type": int},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON output"},
    )

    def __post_init__(self) -> None:
        """Validate field types and numeric ranges.

        Raises
        ------
        ConfigurationError
            If an integer field holds a non-integer, or any field value is
            outside its valid range.

        """
        for name in ("default_heading_level", "min_heading_level", "max_heading_level"):
            self._require_int(name)
        for name in ("max_depth", "indent"):
            self._require_int(name, allow_none=True)

        if self.max_depth is not None and self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be at least 1, got {self.max_depth}", option_name="max_depth")

        if not MIN_HEADING_LEVEL <= self.min_heading_level <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise ConfigurationError(
                f"Heading levels must satisfy {MIN_HEADING_LEVEL} <= min_heading_level <= max_heading_level "
                f"<= {MAX_HEADING_LEVEL}, got min={self.min_heading_level}, max={self.max_heading_level}",
                option_name="min_heading_level",
            )

        if not self.min_heading_level <= self.default_heading_level <= self.max_heading_level:
            raise ConfigurationError(
                f"default_heading_level must be between {self.min_heading_level} and {self.max_heading_level}, "
                f"got {self.default_heading_level}",
                option_name="default_heading_level",
            )

        if self.indent is not None and self.indent < 0:
            raise ConfigurationError(f"indent must be non-negative, got {self.indent}", option_name="indent")

    def _require_int(self, name: str, allow_none: bool = False) -> None:
        value = getattr(self, name)
        if value is None and allow_none:
            return
        # bool is an int subclass; reject it along with floats and strings
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}", option_name=name)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> FormatterOptions:
        """Build options from a configuration mapping.

        Keys may use hyphens or underscores (``max-depth`` or ``max_depth``).

        Parameters
        ----------
        config : Mapping[str, Any]
            Option names mapped to values, e.g. a loaded config file

        Returns
        -------
        FormatterOptions
            Options with the given fields set and all others defaulted

        Raises
        ------
        ConfigurationError
            If a key is not a known option or a value is invalid

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in config.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"Unknown formatter option: '{key}'", option_name=str(key))
            kwargs[name] = value

        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigurationError(f"Invalid formatter options: {e}", original_error=e) from e
