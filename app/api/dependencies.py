from fastapi import Depends, Request

from app.core.registry import RequestRegistry
from app.models.schemas.requests.user import build_user_registry
from app.services.user_request_service import (
    LoggingDispatcher,
    RequestDispatcher,
    UserRequestService,
)


def get_user_registry(request: Request) -> RequestRegistry:
    """Get the user request registry built at startup."""
    registry = getattr(request.app.state, "user_registry", None)
    if registry is None:
        registry = build_user_registry()
        request.app.state.user_registry = registry
    return registry


def get_dispatcher() -> RequestDispatcher:
    """Get the dispatcher that receives validated user requests."""
    return LoggingDispatcher()


def get_user_request_service(
    registry: RequestRegistry = Depends(get_user_registry),
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
) -> UserRequestService:
    return UserRequestService(registry, dispatcher)
