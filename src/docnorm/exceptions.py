#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docnorm library.

This module defines the exception classes raised while decoding, normalizing
and re-encoding an editor document. Every failure terminates the call; no
partial output is ever produced.

Exception Hierarchy
-------------------
- DocnormError (base exception)

  - ParseError (malformed JSON or node grammar violation)

  - ValidationError (decoded document is not acceptable)
    - DepthExceededError (nesting deeper than the configured limit)

  - SerializationError (normalized tree cannot be re-encoded)

  - ConfigurationError (invalid options or config files)

"""

from typing import Any


class DocnormError(Exception):
    """Base exception class for all docnorm-specific errors.

    Catching this will catch every error raised by the library.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ParseError(DocnormError):
    """Exception raised when the encoded document cannot be decoded.

    This covers malformed JSON syntax as well as values that do not follow
    the node grammar, such as a missing ``type`` or a ``content`` field
    that is not a list of nodes.

    Parameters
    ----------
    message : str
        Description of the decode failure
    parsing_stage : str, optional
        The stage where decoding failed (``"json_decoding"`` or ``"node_decoding"``)
    original_error : Exception, optional
        The underlying decode failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the decode process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parse error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ValidationError(DocnormError):
    """Exception raised when a decoded document fails validation.

    Raised when the root node is not a ``doc`` node, in which case content
    is never touched, or when a tree nests too deep to normalize.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the offending field
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic field
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class DepthExceededError(ValidationError):
    """Exception raised when a document nests deeper than ``max_depth``.

    Only raised when a depth limit is configured; by default nesting depth
    is unbounded.

    Parameters
    ----------
    max_depth : int
        The configured nesting limit
    depth : int
        The depth that was reached
    message : str, optional
        Custom error message. If not provided, generates one

    """

    def __init__(self, max_depth: int, depth: int, message: str | None = None):
        """Initialize the depth error."""
        if message is None:
            message = f"Document nesting depth {depth} exceeds the maximum of {max_depth}"
        super().__init__(message, parameter_name="max_depth", parameter_value=depth)
        self.max_depth = max_depth
        self.depth = depth


class SerializationError(DocnormError):
    """Exception raised when the normalized tree cannot be re-encoded.

    Normalization only ever removes nodes or replaces values with JSON
    compatible ones, so this should not occur for trees built by the
    decoder. Trees constructed by hand can still hold values JSON cannot
    represent.

    Parameters
    ----------
    message : str
        Description of the encode failure
    original_error : Exception, optional
        The underlying encode failure

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the serialization error."""
        super().__init__(message, original_error)


class ConfigurationError(DocnormError):
    """Exception raised for invalid formatter options or config files.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    option_name : str, optional
        Name of the offending option
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, option_name: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error)
        self.option_name = option_name
