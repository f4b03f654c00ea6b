"""Comments(comentarios) 기능 API 라우터입니다. 방문자 댓글 작성과 관리자 삭제를 처리합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.config import Settings
from app.database import get_db
from app.dependencies import get_settings
from app.middleware.auth_middleware import get_current_user
from app.schemas.comment import CommentCreate, CommentCreatedOut, CommentOut
from app.schemas.content import MessageOut
from app.services import comment_service
from app.services.auth_service import Identity

router = APIRouter(prefix="/api/comentarios", tags=["comments"])


@router.get("/{item_type}/{item_id}", response_model=List[CommentOut])
def list_comments(item_type: str, item_id: int, db: Session = Depends(get_db)):
    return comment_service.list_comments(db, item_type, item_id)


@router.post("", response_model=CommentCreatedOut, status_code=201)
def create_comment(
    data: CommentCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    comment_id, approved = comment_service.create_comment(db, settings, data)
    if approved:
        return CommentCreatedOut(message="Comment published", id=comment_id, pending=False)
    return CommentCreatedOut(message="Comment awaiting moderation", id=comment_id, pending=True)


@router.delete("/{comment_id}", response_model=MessageOut)
def delete_comment(
    comment_id: int,
    _current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    comment_service.delete_comment(db, comment_id)
    return {"message": "Comment deleted successfully"}
