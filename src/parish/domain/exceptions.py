"""Domain exceptions."""


class ParishError(Exception):
    """Base exception for Parish."""

    pass


class PermissionDenied(ParishError):
    """Role does not have access to the requested module."""

    pass


class NotFound(ParishError):
    """Requested record was not found."""

    pass


class ValidationError(ParishError):
    """Validation failed for input data."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
