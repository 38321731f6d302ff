from pydantic import BaseModel, Field, field_validator, model_validator
from taskez.utils.sanitization import sanitize_string


class UserBase(BaseModel):
    login_key: str = Field(..., min_length=1, max_length=100)

    @field_validator("login_key", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)


class RegisterRequest(UserBase):
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def sanitize_name(cls, v):
        return sanitize_string(v)


class LoginRequest(UserBase):
    password: str = Field(..., min_length=1)


class LogoutRequest(BaseModel):
    login_key: str | None = None
    owner_id: int | None = None

    @model_validator(mode="after")
    def require_identity(self):
        if not self.login_key and self.owner_id is None:
            raise ValueError("login_key or owner_id is required")
        return self


class ApiResponse(BaseModel):
    success: bool = True
    message: str


class LoginResponse(ApiResponse):
    nickname: str
    user_id: int
