from collections.abc import Mapping
from typing import Any, ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict

from app.core.config import UnknownFieldPolicy, get_settings
from app.core.errors import (
    DescriptorValidationError,
    FieldError,
    missing,
    unknown_field,
    wrong_type,
)
from app.core.validators import Rule, apply
from app.models.types.operation import Operation


class BaseResponse(BaseModel):
    """Base response model"""

    model_config = ConfigDict(from_attributes=True)


class FieldSpec(NamedTuple):
    """One row of a descriptor schema table."""

    name: str
    required: bool
    rule: Rule


def collect_fields(
    schema: tuple[FieldSpec, ...],
    raw: Mapping[str, Any],
    unknown_fields: UnknownFieldPolicy,
) -> tuple[dict[str, Any], set[str], list[FieldError]]:
    """Evaluate every field of a schema table against raw input.

    Returns the normalized values that passed, the names of the schema
    fields that were provided, and every error found. Never stops early.
    """
    values: dict[str, Any] = {}
    provided: set[str] = set()
    errors: list[FieldError] = []

    for spec in schema:
        value = raw.get(spec.name)
        if value is None:
            if spec.required:
                errors.append(missing(spec.name))
            continue
        provided.add(spec.name)
        value, error = apply(spec.rule, spec.name, value)
        if error is not None:
            errors.append(error)
        else:
            values[spec.name] = value

    if unknown_fields == UnknownFieldPolicy.REJECT:
        known = {spec.name for spec in schema}
        extras = sorted(str(key) for key in raw if key not in known)
        errors.extend(unknown_field(key) for key in extras)

    return values, provided, errors


class BaseRequest(BaseModel):
    """Immutable, validated request descriptor.

    Subclasses declare ``SCHEMA`` and get ``from_raw`` for free. ``from_raw``
    reports every violation at once; the field constraints on each model
    keep direct construction from producing an invalid instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    RESOURCE: ClassVar[str] = ""
    OPERATION: ClassVar[Operation]
    SCHEMA: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def from_raw(
        cls,
        raw: Any,
        unknown_fields: UnknownFieldPolicy | None = None,
    ) -> "BaseRequest":
        """Validate raw input and build the descriptor.

        Raises DescriptorValidationError listing every violation.
        """
        if not isinstance(raw, Mapping):
            raise DescriptorValidationError(
                [wrong_type(None, "an object")], cls.RESOURCE, cls.OPERATION.value
            )
        if unknown_fields is None:
            unknown_fields = get_settings().UNKNOWN_FIELD_POLICY

        values, provided, errors = collect_fields(cls.SCHEMA, raw, unknown_fields)
        errors.extend(cls.check_provided(provided))
        if errors:
            raise DescriptorValidationError(errors, cls.RESOURCE, cls.OPERATION.value)
        return cls(**values)

    @classmethod
    def check_provided(cls, provided: set[str]) -> list[FieldError]:
        """Request-level checks on which fields were supplied."""
        return []

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(spec.name for spec in cls.SCHEMA)

    def provided(self) -> dict[str, Any]:
        """The validated input, without defaults that were not supplied."""
        return self.model_dump(exclude_unset=True)
