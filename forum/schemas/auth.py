# schemas/auth.py
import re
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from forum.schemas.base import CamelModel

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,})+$")
# At least one uppercase, one lowercase, one digit, five characters overall
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9]).{5,}")


def _check_password(value: str) -> str:
    if not PASSWORD_PATTERN.match(value):
        raise ValueError("must contain an uppercase letter, a lowercase letter and a digit, and be at least 5 characters long")
    return value


class LoginRequest(CamelModel):
    email: str = Field(..., max_length=180)
    password: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if not EMAIL_PATTERN.match(v):
            raise ValueError("E-mail is invalid")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _check_password(v)


class RegisterRequest(LoginRequest):
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def validate_confirm_password(cls, v):
        return _check_password(v)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserSummary(CamelModel):
    user_id: Optional[int] = None
    is_admin: bool = False


class AuthResponse(CamelModel):
    result: Literal["success", "fail"]
    message: str
    user: UserSummary
