"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the notes data layer."""

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PROJECT_REQUIRED = "PROJECT_REQUIRED"

    # Conflict errors
    DUPLICATE_PROJECT = "DUPLICATE_PROJECT"
    DUPLICATE_TAG = "DUPLICATE_TAG"

    # Storage errors
    STORAGE_ERROR = "STORAGE_ERROR"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """A form field failed a business rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details={"field": field},
        )
        self.field = field


class ProjectRequiredError(AppException):
    """No project was selected for a note or tag."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROJECT_REQUIRED,
            message="A project must be selected",
            details={"field": "project_id"},
        )


class DuplicateProjectError(AppException):
    """A project with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_PROJECT,
            message=f"Project '{name}' already exists",
            details={"name": name},
        )


class DuplicateTagError(AppException):
    """A tag with the same name already exists in the project."""

    def __init__(self, name: str, project_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_TAG,
            message=f"Tag '{name}' already exists in this project",
            details={"name": name, "project_id": project_id},
        )


class StorageError(AppException):
    """The durable key-value store rejected an operation."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=message,
            details={"key": key} if key else None,
        )
        self.key = key


class StorageUnavailableError(StorageError):
    """The durable key-value store cannot be used at all."""

    def __init__(self, message: str = "Durable storage is unavailable") -> None:
        super().__init__(message)
        self.error_code = ErrorCode.STORAGE_UNAVAILABLE
