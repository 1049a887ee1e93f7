from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from app.core.schema import BaseRequest
from app.models.types.operation import Operation


class RequestRegistry(Mapping[Operation, type[BaseRequest]]):
    """Fixed, ordered table of request descriptors for one resource.

    Built once at startup and read-only afterwards. It only looks things up;
    validation stays with the descriptors.
    """

    def __init__(
        self,
        resource: str,
        entries: Iterable[tuple[Operation, type[BaseRequest]]],
    ):
        table: dict[Operation, type[BaseRequest]] = {}
        for operation, descriptor in entries:
            operation = Operation(operation)
            if operation in table:
                raise ValueError(
                    f"Duplicate {operation.value} request registered for {resource}"
                )
            table[operation] = descriptor
        self.resource = resource
        self._table = MappingProxyType(table)

    @classmethod
    def from_definitions(
        cls, resource: str, definitions: Iterable[type[BaseRequest]]
    ) -> "RequestRegistry":
        """Build a registry keyed by each descriptor's own OPERATION."""
        return cls(resource, ((d.OPERATION, d) for d in definitions))

    def __getitem__(self, operation: Operation | str) -> type[BaseRequest]:
        try:
            return self._table[Operation(operation)]
        except ValueError:
            raise KeyError(operation) from None

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        names = ", ".join(d.__name__ for d in self._table.values())
        return f"RequestRegistry({self.resource!r}, [{names}])"

    @property
    def operations(self) -> tuple[Operation, ...]:
        return tuple(self._table)

    @property
    def definitions(self) -> tuple[type[BaseRequest], ...]:
        return tuple(self._table.values())

    def construct(self, operation: Operation, raw: Any) -> BaseRequest:
        """Build the descriptor registered for an operation from raw input."""
        return self[operation].from_raw(raw)
