"""Exception classes for codewriter.

Every failure is a programmer error in how a CodeWriter is driven, so
nothing here is meant to be caught and retried.
"""

from __future__ import annotations


class CodeWriterError(Exception):
    """Base exception for all codewriter errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(CodeWriterError):
    """A required formatting strategy or builder function is missing.
    
    Also raised when WriterOptions are constructed with invalid values
    or unknown keys.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initialize configuration error.
        
        Args:
            message: Error description
            option: Name of the offending option (optional)
        """
        self.message = message
        self.option = option

        prefix = f"Option '{option}': " if option else ""
        super().__init__(f"{prefix}{message}")


class UsageError(CodeWriterError):
    """Conditional scope misuse.
    
    Raised when if_() is called inside an open scope, or when else_()
    (and end_if() in strict mode) is called with no scope open.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize usage error.
        
        Args:
            operation: Name of the writer method that was misused
            message: Description of the misuse
        """
        self.operation = operation
        super().__init__(f"{operation}(): {message}")
