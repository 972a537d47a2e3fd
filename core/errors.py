"""Error taxonomy shared by every app.

Apps define their own ``ErrorCode`` enums and subclass one of the
categories below. The category decides the HTTP status a handler maps
the error to.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Broad error categories."""

    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    CONFLICT = "CONFLICT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    EXPIRED = "EXPIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class ValidationFailedError(DomainError):
    kind = ErrorKind.VALIDATION_FAILED


class ExpiredError(DomainError):
    kind = ErrorKind.EXPIRED
