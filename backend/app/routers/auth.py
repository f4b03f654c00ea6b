"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.config import Settings
from app.database import get_db
from app.dependencies import get_settings
from app.schemas.user import LoginRequest, TokenResponse, UserOut, VerifyResponse
from app.services import auth_service
from app.services.auth_service import Identity
from app.middleware.auth_middleware import get_current_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user, token = auth_service.login(db, settings, request.username, request.password)
    return TokenResponse(token=token, user=UserOut.model_validate(user))


@router.get("/verify", response_model=VerifyResponse)
def verify(current_user: Identity = Depends(get_current_user)):
    return VerifyResponse(user=UserOut(id=current_user.id, username=current_user.username))
