"""게시물(Post), 업데이트(Update), 다운로드(Download) 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)  # DD/MM/YYYY
    attachment_path = Column(String(500))
    attachment_mime_type = Column(String(100))
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_posts_created", "created_at"),
        {"sqlite_autoincrement": True},
    )


class Update(Base):
    __tablename__ = "atualizacoes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)
    attachment_path = Column(String(500))
    attachment_mime_type = Column(String(100))
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_atualizacoes_created", "created_at"),
        {"sqlite_autoincrement": True},
    )


class Download(Base):
    __tablename__ = "downloads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    version = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(String(10), nullable=False)
    # exactly one of attachment_path / external_link is set
    attachment_path = Column(String(500))
    attachment_mime_type = Column(String(100))
    external_link = Column(String(1000))
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_downloads_created", "created_at"),
        {"sqlite_autoincrement": True},
    )
