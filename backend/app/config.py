"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path

DEFAULT_JWT_SECRET = "nexo-secret-key"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./nexo.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["*"]

    # JWT
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60

    # Seeded admin account
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "nexo2024"

    # File upload
    MAX_UPLOAD_SIZE: int = 50 * 1024 * 1024  # 50 MB
    ALLOWED_MIME_TYPES: List[str] = [
        "image/jpeg", "image/png", "image/gif", "image/webp",
        "audio/mpeg", "audio/wav", "audio/x-wav", "audio/ogg",
        "application/zip", "application/x-zip-compressed",
        "application/x-rar-compressed", "application/vnd.rar",
    ]
    UPLOAD_DIR: str = "uploads"

    # Comment moderation: False queues new comments until approved
    COMMENT_AUTO_APPROVE: bool = True

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET == DEFAULT_JWT_SECRET

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
