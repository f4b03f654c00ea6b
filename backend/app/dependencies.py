"""라우터에서 공용으로 사용하는 FastAPI 의존성 모음입니다."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.repositories import (
    CommentRepository,
    DownloadRepository,
    PostRepository,
    UpdateRepository,
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_update_repository(db: Session = Depends(get_db)) -> UpdateRepository:
    return UpdateRepository(db)


def get_download_repository(db: Session = Depends(get_db)) -> DownloadRepository:
    return DownloadRepository(db)


def get_comment_repository(db: Session = Depends(get_db)) -> CommentRepository:
    return CommentRepository(db)
