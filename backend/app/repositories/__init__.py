"""저장소 패키지 초기화 모듈입니다."""

from app.repositories.base import EntityRepository
from app.repositories.entities import (
    ITEM_REPOSITORIES,
    CommentRepository,
    DownloadRepository,
    PostRepository,
    UpdateRepository,
    UserRepository,
)

__all__ = [
    "EntityRepository",
    "UserRepository",
    "PostRepository", "UpdateRepository", "DownloadRepository",
    "CommentRepository",
    "ITEM_REPOSITORIES",
]
