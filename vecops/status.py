"""Status codes and the exceptions that carry them."""

from enum import IntEnum


class Status(IntEnum):
    """Result codes used by vector operations."""

    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    MEMORY_ALLOCATION_ERROR = 503
    UNDEFINED_TYPE = 504


class VectorError(Exception):
    """Base error for vector and scalar operations."""

    status: Status = Status.BAD_REQUEST

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.status.name.replace("_", " ").lower())


class NotFoundError(VectorError):
    """An operand is missing or the operands do not fit together."""

    status = Status.NOT_FOUND


class UndefinedTypeError(VectorError):
    """Operands are of incompatible element types."""

    status = Status.UNDEFINED_TYPE