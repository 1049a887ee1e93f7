from typing import Any

from app.core.errors import FieldError
from app.core.schema import BaseResponse
from app.models.types.operation import Operation


class UserRequestAccepted(BaseResponse):
    operation: Operation
    resource: str
    data: dict[str, Any]


class InvalidRequestResponse(BaseResponse):
    detail: str
    errors: list[FieldError]
