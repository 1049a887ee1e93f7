import pytest

from app.core.errors import DescriptorValidationError, ErrorCode
from app.core.registry import RequestRegistry
from app.models.schemas.requests.user import (
    CreateUserRequest,
    DeleteUserRequest,
    Requests,
    UpdateUserRequest,
)
from app.models.types.operation import Operation


def test_requests_aggregate_order():
    assert Requests == (CreateUserRequest, UpdateUserRequest, DeleteUserRequest)


def test_registry_order(registry: RequestRegistry):
    assert registry.resource == "user"
    assert registry.definitions == Requests
    assert registry.operations == (
        Operation.CREATE,
        Operation.UPDATE,
        Operation.DELETE,
    )
    assert list(registry) == list(registry.operations)
    assert len(registry) == 3


def test_registry_lookup(registry: RequestRegistry):
    assert registry[Operation.CREATE] is CreateUserRequest
    assert registry["update"] is UpdateUserRequest
    assert registry.get(Operation.DELETE) is DeleteUserRequest
    assert Operation.UPDATE in registry


def test_registry_unknown_operation(registry: RequestRegistry):
    with pytest.raises(KeyError):
        registry["archive"]
    assert "archive" not in registry
    assert registry.get("archive") is None


def test_registry_missing_operation():
    registry = RequestRegistry("user", [(Operation.CREATE, CreateUserRequest)])
    assert Operation.DELETE not in registry
    with pytest.raises(KeyError):
        registry[Operation.DELETE]


def test_registry_is_read_only(registry: RequestRegistry):
    with pytest.raises(TypeError):
        registry["create"] = DeleteUserRequest  # type: ignore[index]
    with pytest.raises(TypeError):
        registry._table[Operation.CREATE] = DeleteUserRequest  # type: ignore[index]


def test_registry_rejects_duplicates():
    with pytest.raises(ValueError) as exc_info:
        RequestRegistry(
            "user",
            [
                (Operation.CREATE, CreateUserRequest),
                (Operation.CREATE, UpdateUserRequest),
            ],
        )
    assert "Duplicate create request" in str(exc_info.value)


def test_registry_entries_keep_given_order():
    registry = RequestRegistry(
        "user",
        [
            (Operation.DELETE, DeleteUserRequest),
            (Operation.CREATE, CreateUserRequest),
        ],
    )
    assert registry.definitions == (DeleteUserRequest, CreateUserRequest)


def test_registry_construct_delegates(registry: RequestRegistry):
    request = registry.construct(Operation.DELETE, {"id": "42"})
    assert request == DeleteUserRequest(id=42)

    with pytest.raises(DescriptorValidationError) as exc_info:
        registry.construct(Operation.UPDATE, {"id": "42"})
    assert exc_info.value.codes == [ErrorCode.EMPTY_UPDATE]


def test_operation_from_method():
    assert Operation.from_method("POST") == Operation.CREATE
    assert Operation.from_method("put") == Operation.UPDATE
    assert Operation.from_method("PATCH") == Operation.UPDATE
    assert Operation.from_method("DELETE") == Operation.DELETE
    with pytest.raises(ValueError):
        Operation.from_method("GET")
