from enum import Enum


class Operation(str, Enum):
    """Operations a request descriptor can describe."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def from_method(cls, method: str) -> "Operation":
        """Map an HTTP method to the operation it requests."""
        try:
            return _METHODS[method.upper()]
        except KeyError:
            raise ValueError(f"No operation for HTTP method {method}") from None


_METHODS = {
    "POST": Operation.CREATE,
    "PUT": Operation.UPDATE,
    "PATCH": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}
