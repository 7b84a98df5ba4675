class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid at the request boundary."""


class AuthError(DomainError):
    """Raised when sign-in or sign-up is rejected.

    The message is shown to the user as is.
    """


class StoreError(DomainError):
    """Base class for document store failures."""


class StoreReadError(StoreError):
    """Raised when a month record cannot be read."""


class StoreWriteError(StoreError):
    """Raised when a month record cannot be written."""
