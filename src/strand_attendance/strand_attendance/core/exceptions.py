class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageUnavailableError(DomainError):
    """Raised when the attendance store cannot be reached or fails a request."""
