"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class ValidationError(DomainError):
    """Raised when a domain name, date or mutation field is invalid."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class AuthorizationError(DomainError):
    """Raised when the caller's access context does not permit an operation."""
