from typing import Any

from fastapi import APIRouter, Depends, Request, status

from app.api.dependencies import get_user_request_service
from app.core.config import get_settings
from app.core.errors import DescriptorValidationError
from app.models.schemas.responses.user import InvalidRequestResponse, UserRequestAccepted
from app.models.types.operation import Operation
from app.services.user_request_service import UserRequestService
from app.utils.errors import InvalidRequestError

router = APIRouter(prefix=f"{get_settings().API_V1_STR}/users", tags=["users"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {"model": InvalidRequestResponse},
}


def _accept(
    service: UserRequestService, http_request: Request, raw: Any
) -> UserRequestAccepted:
    operation = Operation.from_method(http_request.method)
    try:
        request = service.handle(operation, raw)
    except DescriptorValidationError as e:
        raise InvalidRequestError.from_validation(e)
    return UserRequestAccepted(
        operation=operation,
        resource=request.RESOURCE,
        data=request.model_dump(mode="json", exclude_none=True),
    )


async def _read_body(http_request: Request) -> Any:
    """Parse the JSON body; an empty or malformed body reads as None."""
    try:
        return await http_request.json()
    except ValueError:
        return None


def _with_path_id(body: Any, user_id: str) -> Any:
    if not isinstance(body, dict):
        return body
    return {**body, "id": user_id}


@router.post(
    "",
    response_model=UserRequestAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    responses=ERROR_RESPONSES,
)
async def create_user(
    http_request: Request,
    service: UserRequestService = Depends(get_user_request_service),
) -> UserRequestAccepted:
    """Validate and dispatch a user creation request."""
    return _accept(service, http_request, await _read_body(http_request))


@router.put(
    "/{user_id}",
    response_model=UserRequestAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    responses=ERROR_RESPONSES,
)
@router.patch(
    "/{user_id}",
    response_model=UserRequestAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    responses=ERROR_RESPONSES,
)
async def update_user(
    user_id: str,
    http_request: Request,
    service: UserRequestService = Depends(get_user_request_service),
) -> UserRequestAccepted:
    """Validate and dispatch a partial user update."""
    body = await _read_body(http_request)
    return _accept(service, http_request, _with_path_id(body, user_id))


@router.delete(
    "/{user_id}",
    response_model=UserRequestAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    responses=ERROR_RESPONSES,
)
async def delete_user(
    user_id: str,
    http_request: Request,
    service: UserRequestService = Depends(get_user_request_service),
) -> UserRequestAccepted:
    """Validate and dispatch a user deletion."""
    return _accept(service, http_request, {"id": user_id})
