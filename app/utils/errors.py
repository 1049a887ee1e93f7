from fastapi import HTTPException

from app.core.errors import DescriptorValidationError


class APIError(HTTPException):
    """Base API error class with predefined status codes and messages."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class InvalidRequestError(APIError):
    """Request input failed descriptor validation."""

    def __init__(self, detail: str, errors: list[dict] | None = None):
        super().__init__(status_code=422, detail=detail)
        self.errors = errors or []

    @classmethod
    def from_validation(cls, exc: DescriptorValidationError) -> "InvalidRequestError":
        resource = exc.resource or "request"
        return cls(
            detail=f"Invalid {resource} request",
            errors=[error.model_dump(mode="json") for error in exc.errors],
        )


class UnsupportedOperationError(APIError):
    """No request descriptor is registered for the operation."""

    def __init__(self, operation: str, resource: str):
        super().__init__(
            status_code=405, detail=f"{operation} is not supported for {resource}"
        )
