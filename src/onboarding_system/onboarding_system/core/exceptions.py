class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record (or its backing file) does not exist."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidTokenError(DomainError):
    """Raised when a session token is malformed or does not match the active session."""


class TokenExpiredError(InvalidTokenError):
    """Raised when a session token is older than the session lifetime."""


class StorageError(DomainError):
    """Raised when a data file cannot be read or written."""


class DataParseError(DomainError):
    """Raised when a data file does not hold a valid JSON document."""
