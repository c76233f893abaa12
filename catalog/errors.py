# catalog/errors.py
from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"


_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
}


class ApiError(Exception):
    """
    Operational error: an anticipated failure that is safe to describe to
    the client. The HTTP status follows from ``kind``; anything raised that
    is not an ApiError is treated as an unexpected fault (500).
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[List[str]] = None):
        self.kind = kind
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def status(self) -> int:
        return _STATUS[self.kind]

    def to_response(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = list(self.details)
        return body

    @classmethod
    def not_found(cls, message: str = "Resource not found") -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, details: List[str], message: str = "Validation failed") -> "ApiError":
        return cls(ErrorKind.VALIDATION, message, details)

    @classmethod
    def unauthorized(cls, header: str = "X-API-Key") -> "ApiError":
        return cls(ErrorKind.UNAUTHORIZED, f"Unauthorized: Invalid or missing {header} header")
