"""Exception classes for tipos.

Rendering never raises: missing parts of a tree render as empty strings.
Errors only come from decoding serialized trees.
"""

from __future__ import annotations


class TiposError(Exception):
    """Base exception for all tipos errors."""

    pass


class NodeDecodeError(TiposError):
    """Serialized type tree could not be decoded.

    Raised when a value that should be a node is not a mapping, or when
    a child sequence is not a list.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize decode error with optional location.

        Args:
            message: Error description
            path: Dotted path to the offending value (e.g. "$.elements[1]")
        """
        self.message = message
        self.path = path

        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")
