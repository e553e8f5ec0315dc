"""Custom exceptions for size-converter."""


class SizeConverterError(Exception):
    """Base exception for size-converter."""

    pass


class TableNotFoundError(SizeConverterError):
    """Raised when a reference table cannot be loaded."""

    pass


class UnsupportedTypeError(SizeConverterError):
    """Raised when no resolver is registered for a size type."""

    pass


class ConversionFailedError(SizeConverterError):
    """Raised by ConversionResult.raise_for_error for failed conversions."""

    def __init__(self, message: str, *, error=None):
        super().__init__(message)
        self.error = error
