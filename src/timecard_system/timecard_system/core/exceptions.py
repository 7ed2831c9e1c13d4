class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when an employee does not exist or is inactive."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a uniqueness rule is violated (e.g. duplicate employee name)."""

    status_code = 409


class StorageError(DomainError):
    """Raised when the data store is unreachable, misconfigured or missing schema."""

    status_code = 500
