"""Typed exceptions for input handling and I/O formats."""


class ReformatError(Exception):
    """Base class for errors raised by the package."""


class InvalidInputTypeError(ReformatError, TypeError):
    """Raised when a source is neither a path, a readable stream nor a buffer."""


class IOFormatError(ReformatError, ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
