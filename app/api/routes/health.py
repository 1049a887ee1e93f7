from fastapi import APIRouter, Depends

from app.api.dependencies import get_user_registry
from app.core.config import get_settings
from app.core.registry import RequestRegistry

router = APIRouter(prefix=f"{get_settings().API_V1_STR}/health", tags=["health"])


@router.get("")
async def health_check(
    registry: RequestRegistry = Depends(get_user_registry),
) -> dict[str, str | list[str]]:
    """Report liveness and the operations the user registry accepts."""
    return {
        "status": "healthy",
        "resource": registry.resource,
        "operations": [operation.value for operation in registry],
    }
