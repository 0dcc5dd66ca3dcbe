"""Domain-level exception hierarchy."""


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = "Domain error") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(DomainError):
    """Raised when the caller supplies structurally invalid input."""


class NotFoundError(DomainError):
    """Raised when a requested resource cannot be located."""


class ForbiddenError(DomainError):
    """Raised when a user attempts an operation they are not allowed to perform."""


class UnauthorizedError(DomainError):
    """Raised when authentication credentials are invalid."""
