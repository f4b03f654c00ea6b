"""Comment 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Optional
from datetime import datetime

from app.schemas.content import CamelModel


class CommentCreate(CamelModel):
    # presence and length bounds are enforced by the moderation policy
    item_type: Optional[str] = None
    item_id: Optional[int] = None
    author_name: Optional[str] = None
    body: Optional[str] = None


class CommentOut(CamelModel):
    id: int
    item_type: str
    item_id: int
    author_name: str
    body: str
    date: str
    approved: bool
    created_at: Optional[datetime] = None


class CommentCreatedOut(CamelModel):
    message: str
    id: int
    pending: bool
