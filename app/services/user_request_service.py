from typing import Any, Protocol

from loguru import logger

from app.core.errors import DescriptorValidationError
from app.core.registry import RequestRegistry
from app.core.schema import BaseRequest
from app.models.types.operation import Operation
from app.utils.errors import UnsupportedOperationError


class RequestDispatcher(Protocol):
    """Receives validated descriptors and carries out the operation."""

    def dispatch(self, operation: Operation, request: BaseRequest) -> None: ...


class LoggingDispatcher:
    """Default dispatcher; storage is wired in by overriding get_dispatcher."""

    def dispatch(self, operation: Operation, request: BaseRequest) -> None:
        logger.info(
            f"Dispatching {operation.value} {request.RESOURCE} request: "
            f"{request.provided()}"
        )


class UserRequestService:
    """Service turning raw user input into dispatched request descriptors"""

    def __init__(self, registry: RequestRegistry, dispatcher: RequestDispatcher):
        self.registry = registry
        self.dispatcher = dispatcher

    def build(self, operation: Operation, raw: Any) -> BaseRequest:
        """Construct the registered descriptor for an operation"""
        if operation not in self.registry:
            raise UnsupportedOperationError(operation.value, self.registry.resource)

        try:
            request = self.registry.construct(operation, raw)
        except DescriptorValidationError as e:
            logger.info(
                f"Rejected {operation.value} {self.registry.resource} request: "
                f"{[error.code.value for error in e.errors]}"
            )
            raise
        return request

    def handle(self, operation: Operation, raw: Any) -> BaseRequest:
        """Validate raw input and pass the descriptor to the dispatcher"""
        request = self.build(operation, raw)
        self.dispatcher.dispatch(operation, request)
        return request
