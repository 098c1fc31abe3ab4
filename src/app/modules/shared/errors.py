"""
Service Errors

Business-rule failures raised by service functions. The application-level
exception handler renders them as ``{"error": error_code, "message": message}``
with the carried HTTP status code.
"""


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(ServiceError):
    """Raised when a requested record does not exist."""

    def __init__(self, resource: str, identifier: int | str | None = None):
        message = f"{resource} {identifier} not found" if identifier is not None else f"{resource} not found"
        super().__init__(
            message=message,
            error_code=f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
            status_code=404,
        )


class InvalidReferenceError(ServiceError):
    """Raised when a record points at a lookup row that does not exist."""

    def __init__(self, field: str, value: int):
        super().__init__(
            message=f"Unknown {field}: {value}",
            error_code="INVALID_REFERENCE",
            status_code=400,
        )
