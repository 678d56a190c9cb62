"""Domain errors surfaced to the request boundary."""


class PlatformError(Exception):
    """Base class for errors returned to API callers.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message.
    """

    code = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GenericError(PlatformError):
    """Raised when a required argument is missing."""


class NotFoundError(PlatformError):
    """Raised when a referenced entity does not exist."""

    code = "not_found"


class UnauthorizedError(PlatformError):
    """Raised when the caller may not read the requested data."""

    code = "unauthorized"


class ValidationError(PlatformError):
    """Raised when caller-supplied arguments are malformed.

    Attributes:
        fields: Names of the offending input fields.
    """

    code = "validation_failed"

    def __init__(
        self,
        message: str,
        fields: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.fields = list(fields or [])


__all__ = [
    "PlatformError",
    "GenericError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
