class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required selection is missing."""


class ParseError(ValidationError):
    """Raised for malformed month labels, dates or amounts."""


class RemoteOperationError(DomainError):
    """Raised when the persistence backend rejects or fails an operation.

    The backend message is kept verbatim so it can be shown to the user.
    """


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
