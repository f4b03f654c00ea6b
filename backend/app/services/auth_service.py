"""Auth Service 도메인 서비스 레이어입니다. 비밀번호 검증, 토큰 발급/검증, 관리자 계정 시드를 담당합니다."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from sqlalchemy.orm import Session

from app.config import Settings
from app.models.user import User
from app.repositories import UserRepository
from app.utils.exceptions import AuthenticationError, AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
# bcrypt only reads the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class Identity:
    id: int
    username: str


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))


def create_access_token(user: User, settings: Settings, expires_delta: timedelta | None = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    payload = {"id": user.id, "username": user.username, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> Identity:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError("Session expired")
    except JWTError:
        raise AuthorizationError("Invalid token")

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or not isinstance(username, str):
        raise AuthorizationError("Invalid token payload")
    return Identity(id=user_id, username=username)


def login(db: Session, settings: Settings, username: str | None, password: str | None) -> tuple[User, str]:
    if not username or not password:
        raise ValidationError("Username and password are required")

    user = UserRepository(db).get_by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt for username=%s", username)
        raise AuthenticationError("Invalid credentials")

    logger.info("User %s logged in", user.username)
    return user, create_access_token(user, settings)


def ensure_admin(db: Session, settings: Settings) -> bool:
    """Create the administrative account if it does not exist yet. Returns True when created."""
    users = UserRepository(db)
    if users.get_by_username(settings.ADMIN_USERNAME) is not None:
        return False
    users.create(username=settings.ADMIN_USERNAME, password_hash=hash_password(settings.ADMIN_PASSWORD))
    logger.info("Seeded admin account '%s'", settings.ADMIN_USERNAME)
    return True
