# core/sa/errors.py


class DatabaseConnectionError(RuntimeError):
    """Raised when the relational backend cannot be reached at startup."""


class ConstraintViolation(ValueError):
    """Raised when a write conflicts with a unique index (email, call number)."""
