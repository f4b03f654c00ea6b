from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config import Settings
from app.dependencies import get_settings
from app.services.auth_service import Identity, decode_token
from app.utils.exceptions import AuthenticationError

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if credentials is None:
        raise AuthenticationError("Token not provided")
    return decode_token(credentials.credentials, settings)
