"""Exception classes for formattable.

Provides standardized exceptions for error handling throughout formattable.
"""

from __future__ import annotations


class FormattableError(Exception):
    """Base exception for all formattable errors.
    
    Subclass this for specific error categories.
    """

    pass


class MalformedFragmentError(FormattableError, TypeError):
    """A fragment or one of its pieces violates the construction contract.
    
    Raised by the builder before anything is written, so the template and
    argument list are left untouched.
    """

    def __init__(self, message: str, piece_index: int | None = None) -> None:
        """Initialize malformed fragment error.
        
        Args:
            message: Description of the problem
            piece_index: Position of the offending piece (None = the fragment itself)
        """
        self.message = message
        self.piece_index = piece_index

        location = f"piece {piece_index}: " if piece_index is not None else ""
        super().__init__(f"{location}{message}")


class RenderError(FormattableError, ValueError):
    """Error while rendering a composite format string.
    
    Raised when the template is not valid composite format syntax, refers
    to a missing argument, or an argument cannot be formatted.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        """Initialize render error with optional template offset.
        
        Args:
            message: Error description
            position: Offset in the template where the error was detected
        """
        self.message = message
        self.position = position

        location = f" (at offset {position})" if position is not None else ""
        super().__init__(f"{message}{location}")
