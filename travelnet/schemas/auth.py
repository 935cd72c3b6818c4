"""Auth Schemas — request bodies and response envelopes for auth/user endpoints.

Invariants:
    - Request bodies declare snake_case fields; the payload encoder guarantees
      snake_case wire keys. The refresh body {refreshToken} is the one exception and
      is written by the auth interceptor
    - Login returns {data: {user, accessToken, refreshToken?}}
    - Refresh returns {accessToken, refreshToken?}, optionally wrapped in {data: ...}
    - Error bodies come in two shapes: {message, code?, details?} and
      {errors: [{status, code, title, detail}]}
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from travelnet.schemas.wire import WireModel


# ─── Requests ───────────────────────────────────────────────────

class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str
    phone: str


# ─── Responses ──────────────────────────────────────────────────

class UserPayload(WireModel):
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Backend ids are integers on some endpoints, strings on others."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class TokenPayload(WireModel):
    access_token: str
    refresh_token: str | None = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_data_envelope(cls, v: Any) -> Any:
        if isinstance(v, dict) and "accessToken" not in v and isinstance(v.get("data"), dict):
            return v["data"]
        return v


class LoginData(WireModel):
    user: UserPayload
    access_token: str
    refresh_token: str | None = None


class LoginResponse(WireModel):
    data: LoginData


class RegisterData(WireModel):
    user: UserPayload
    token: str | None = None


class RegisterResponse(WireModel):
    data: RegisterData


class ProfileUserPayload(UserPayload):
    """/v1/auth/me may omit the id."""
    id: str | None = None


class UserProfileData(WireModel):
    user: ProfileUserPayload


class UserProfileResponse(WireModel):
    data: UserProfileData


# ─── Errors ─────────────────────────────────────────────────────

class ErrorResponse(WireModel):
    message: str
    code: str | None = None
    details: dict[str, Any] | None = None

    @field_validator("code", mode="before")
    @classmethod
    def stringify_code(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v


class APIErrorItem(WireModel):
    status: int | None = None
    code: int | str | None = None
    title: str | None = None
    detail: str | None = None


class ErrorListResponse(WireModel):
    errors: list[APIErrorItem] = Field(min_length=1)
