"""Comment 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index
from sqlalchemy.sql import func
from app.database import Base

ITEM_TYPES = ("post", "update", "download")


class Comment(Base):
    __tablename__ = "comentarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_type = Column(String(20), nullable=False)  # post/update/download
    item_id = Column(Integer, nullable=False)
    author_name = Column(String(50), nullable=False)
    body = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)
    approved = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_comment_item", "item_type", "item_id"),
        {"sqlite_autoincrement": True},
    )
