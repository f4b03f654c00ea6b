"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import User
from app.models.content import Post, Update, Download
from app.models.comment import Comment

__all__ = [
    "User",
    "Post", "Update", "Download",
    "Comment",
]
