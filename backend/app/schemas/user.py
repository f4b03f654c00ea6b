"""User/인증 요청·응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional


class UserOut(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    # missing fields are reported by the login handler, not by pydantic
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    message: str = "Login successful"
    token: str
    user: UserOut


class VerifyResponse(BaseModel):
    valid: bool = True
    user: UserOut
