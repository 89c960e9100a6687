"""
Error kinds raised by the forum services and their HTTP status codes
"""
import enum

from fastapi import status


class ErrorKind(str, enum.Enum):
    MISSING_OR_INVALID_FIELD = "missing_or_invalid_field"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    BAD_CREDENTIALS = "bad_credentials"


STATUS_CODES = {
    ErrorKind.MISSING_OR_INVALID_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.BAD_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
}


class ForumError(Exception):
    """Service-level failure tagged with its kind"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @classmethod
    def not_found(cls, what: str) -> "ForumError":
        return cls(ErrorKind.NOT_FOUND, f"{what} not found!")

    @classmethod
    def invalid(cls, message: str) -> "ForumError":
        return cls(ErrorKind.MISSING_OR_INVALID_FIELD, message)
