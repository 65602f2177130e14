from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, ids)
        code: machine-readable error code used in the JSON error body
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"
    default_code = "SERVICE_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a business rule is not met (400)."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "VALIDATION_ERROR"


class NotFoundError(ServiceError):
    """Raised when a requested or referenced resource does not exist (404)."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(ServiceError):
    """Raised when a uniqueness constraint would be violated (e.g. duplicate email)."""

    http_status = 400
    default_message = "Conflict"
    default_code = "CONFLICT"


class DependentRecordsError(ConflictError):
    """Raised when a delete is blocked because other records still reference the row.

    Reported as 500 to match the documented delete contract of the API.
    """

    http_status = 500
    default_message = "Record has dependent records"
    default_code = "HAS_DEPENDENT_RECORDS"


class StorageUnavailableError(ServiceError):
    """Raised when the database cannot be reached. Internal detail is never exposed."""

    http_status = 500
    default_message = "Storage unavailable"
    default_code = "STORAGE_UNAVAILABLE"
