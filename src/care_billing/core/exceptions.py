class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInput(ValidationError):
    """Raised when cost allocation inputs cannot be priced.

    Shift creation/update must be rejected before anything is persisted.
    """
