from typing import Annotated, Any, ClassVar

from pydantic import EmailStr, Field, StrictBool, StringConstraints, model_validator

from app.core.errors import FieldError, empty_update
from app.core.registry import RequestRegistry
from app.core.schema import BaseRequest, FieldSpec
from app.core.validators import (
    compose,
    is_bool,
    is_email,
    is_str,
    max_length,
    non_blank,
    one_of,
    positive_int_id,
    stripped,
)
from app.models.types.operation import Operation
from app.models.types.user_role import UserRole

USER_RESOURCE = "user"
MAX_NAME_LENGTH = 255

NAME_RULES = compose(is_str, stripped, non_blank, max_length(MAX_NAME_LENGTH))
EMAIL_RULES = compose(is_str, stripped, is_email)
ROLE_RULES = compose(is_str, stripped, one_of(role.value for role in UserRole))
IS_ACTIVE_RULES = is_bool
ID_RULES = positive_int_id

Name = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_NAME_LENGTH)
]
Identifier = Annotated[int, Field(gt=0, strict=True)]


class CreateUserRequest(BaseRequest):
    """Fields needed to create a user. The id is assigned by storage."""

    RESOURCE: ClassVar[str] = USER_RESOURCE
    OPERATION: ClassVar[Operation] = Operation.CREATE
    SCHEMA: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("name", True, NAME_RULES),
        FieldSpec("email", True, EMAIL_RULES),
        FieldSpec("role", False, ROLE_RULES),
        FieldSpec("is_active", False, IS_ACTIVE_RULES),
    )

    name: Name
    email: EmailStr
    role: UserRole = UserRole.USER
    is_active: StrictBool = True


class UpdateUserRequest(BaseRequest):
    """Partial update of an existing user."""

    RESOURCE: ClassVar[str] = USER_RESOURCE
    OPERATION: ClassVar[Operation] = Operation.UPDATE
    SCHEMA: ClassVar[tuple[FieldSpec, ...]] = (
        FieldSpec("id", True, ID_RULES),
        FieldSpec("name", False, NAME_RULES),
        FieldSpec("email", False, EMAIL_RULES),
        FieldSpec("role", False, ROLE_RULES),
        FieldSpec("is_active", False, IS_ACTIVE_RULES),
    )

    id: Identifier
    name: Name | None = None
    email: EmailStr | None = None
    role: UserRole | None = None
    is_active: StrictBool | None = None

    @model_validator(mode="after")
    def check_not_empty(self) -> "UpdateUserRequest":
        if all(
            getattr(self, name) is None for name in self.field_names() if name != "id"
        ):
            raise ValueError(empty_update().message)
        return self

    @classmethod
    def check_provided(cls, provided: set[str]) -> list[FieldError]:
        if not provided - {"id"}:
            return [empty_update()]
        return []

    @property
    def changes(self) -> dict[str, Any]:
        """Only the fields the client asked to change."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class DeleteUserRequest(BaseRequest):
    RESOURCE: ClassVar[str] = USER_RESOURCE
    OPERATION: ClassVar[Operation] = Operation.DELETE
    SCHEMA: ClassVar[tuple[FieldSpec, ...]] = (FieldSpec("id", True, ID_RULES),)

    id: Identifier


Requests = (
    CreateUserRequest,
    UpdateUserRequest,
    DeleteUserRequest,
)


def build_user_registry() -> RequestRegistry:
    """Create the user request registry; call once at startup."""
    return RequestRegistry.from_definitions(USER_RESOURCE, Requests)
