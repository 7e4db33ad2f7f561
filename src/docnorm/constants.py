#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for docnorm.

This module centralizes the node type tags, heading level bounds, output
encoding defaults and CLI exit codes used across the library.

Constants are organized by category:
1. Version - The formatter version reported to callers
2. Node Types - Type tags with special normalization rules
3. Heading Levels - Clamp bounds and the default level
4. Output Encoding - JSON serialization defaults
5. CLI - Config file names and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Version
# =============================================================================

FORMATTER_VERSION = "1.0.0"

# =============================================================================
# Node Types
# =============================================================================

NODE_TYPE_DOC = "doc"
NODE_TYPE_PARAGRAPH = "paragraph"
NODE_TYPE_HEADING = "heading"
NODE_TYPE_TEXT = "text"
NODE_TYPE_IMAGE = "image"

# Field order used when encoding a node back to JSON
NODE_FIELD_ORDER = ("type", "content", "text", "attrs", "marks")

# =============================================================================
# Heading Levels
# =============================================================================

HEADING_LEVEL_ATTR = "level"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6
DEFAULT_HEADING_LEVEL = 2

# A level outside the signed 64-bit range is not integer-like
MIN_INTEGER_LEVEL = -(2**63)
MAX_INTEGER_LEVEL = 2**63 - 1

# =============================================================================
# Output Encoding
# =============================================================================

DEFAULT_MAX_DEPTH: int | None = None
DEFAULT_WARN_ON_COERCED_LEVEL = False
DEFAULT_JSON_INDENT: int | None = None
DEFAULT_JSON_ENSURE_ASCII = False

# Separators for compact output (no whitespace between tokens)
COMPACT_JSON_SEPARATORS = (",", ":")

# =============================================================================
# CLI
# =============================================================================

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_ENV_VAR = "DOCNORM_CONFIG"
CONFIG_FILENAMES = [".docnorm.toml", ".docnorm.yaml", ".docnorm.yml", ".docnorm.json"]
PYPROJECT_TOOL_SECTION = "docnorm"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_SERIALIZATION_ERROR = 7
EXIT_CHECK_FAILED = 8
