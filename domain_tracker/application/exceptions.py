"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class StoreUnavailableError(ApplicationError):
    """Raised when the record store cannot be reached or fails."""


class LookupFailedError(ApplicationError):
    """Raised when an external registration or zone lookup fails."""


class RecordNotFoundError(ApplicationError):
    """Raised when a requested domain record does not exist."""
