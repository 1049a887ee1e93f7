from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.routes import health, users
from app.core.config import get_settings
from app.core.logging import setup_logger
from app.models.schemas.requests.user import build_user_registry
from app.utils.errors import InvalidRequestError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    try:
        setup_logger()
        app.state.user_registry = build_user_registry()
        logger.info(f"Registered request descriptors: {app.state.user_registry}")
        yield
    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise
    finally:
        logger.info("Shutting down...")


app = FastAPI(
    title=get_settings().PROJECT_NAME,
    description="Validation and dispatch of user create, update and delete requests",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health.router)
app.include_router(users.router)


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(
    request: Request, exc: InvalidRequestError
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "errors": exc.errors},
    )
