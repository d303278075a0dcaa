# cropmarket/services/result.py

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


@dataclass
class ServiceResult:
    """
    Outcome of a service call: either a value or an error kind + message.
    Services return these instead of raising for expected failures.
    """
    value: Any = None
    kind: Optional[ErrorKind] = None
    error: str = ""
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: Any = None) -> "ServiceResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str, detail: str = "") -> "ServiceResult":
        return cls(kind=kind, error=error, detail=detail)

