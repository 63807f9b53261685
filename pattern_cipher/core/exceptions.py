from typing import Any


class CipherError(Exception):
    """Base exception for all cipher engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(CipherError):
    """Raised when a cipher configuration cannot produce an invertible transform."""

    pass


class InputError(CipherError):
    """Raised when the text supplied to an operation is unusable."""

    pass


class EmptyInputError(InputError):
    """Raised when the supplied text is missing, not a string, or blank."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Please supply a message to {operation}.",
            {"operation": operation},
        )


class TextTooLongError(InputError):
    """Raised when the supplied text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )
