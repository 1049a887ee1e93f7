from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Machine-readable reasons a request field was rejected."""

    MISSING = "missing"
    WRONG_TYPE = "wrong-type"
    BAD_FORMAT = "bad-format"
    EMPTY_UPDATE = "empty-update"
    UNKNOWN_FIELD = "unknown-field"


class FieldError(BaseModel):
    """A single violation. `field` is None for request-level errors."""

    model_config = ConfigDict(frozen=True)

    field: str | None
    code: ErrorCode
    message: str


class DescriptorValidationError(Exception):
    """Raised when raw input cannot be turned into a request descriptor.

    Carries every violation found during one construction attempt.
    """

    def __init__(
        self,
        errors: list[FieldError],
        resource: str | None = None,
        operation: str | None = None,
    ):
        self.errors = list(errors)
        self.resource = resource
        self.operation = operation
        summary = ", ".join(
            f"{error.field}: {error.code.value}" if error.field else error.code.value
            for error in self.errors
        )
        super().__init__(f"Invalid {resource or 'request'} input ({summary})")

    @property
    def codes(self) -> list[ErrorCode]:
        return [error.code for error in self.errors]

    def for_field(self, field: str) -> list[FieldError]:
        """Return the errors reported against one field."""
        return [error for error in self.errors if error.field == field]


def missing(field: str) -> FieldError:
    return FieldError(field=field, code=ErrorCode.MISSING, message=f"{field} is required")


def wrong_type(field: str | None, expected: str) -> FieldError:
    subject = field or "request body"
    return FieldError(
        field=field,
        code=ErrorCode.WRONG_TYPE,
        message=f"{subject} must be {expected}",
    )


def bad_format(field: str, detail: str) -> FieldError:
    return FieldError(field=field, code=ErrorCode.BAD_FORMAT, message=f"{field} {detail}")


def unknown_field(field: str) -> FieldError:
    return FieldError(
        field=field, code=ErrorCode.UNKNOWN_FIELD, message=f"{field} is not allowed"
    )


def empty_update() -> FieldError:
    return FieldError(
        field=None,
        code=ErrorCode.EMPTY_UPDATE,
        message="At least one field to update must be provided",
    )
