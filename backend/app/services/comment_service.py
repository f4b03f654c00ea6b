"""Comment Service 도메인 서비스 레이어입니다. 댓글 검증과 모더레이션 정책을 캡슐화합니다."""

import logging
from typing import List

from sqlalchemy.orm import Session

from app.config import Settings
from app.models.comment import ITEM_TYPES, Comment
from app.repositories import ITEM_REPOSITORIES, CommentRepository
from app.schemas.comment import CommentCreate
from app.services.content_service import ITEM_LABELS
from app.utils.exceptions import NotFoundError, ValidationError
from app.utils.helpers import today_str

logger = logging.getLogger(__name__)

AUTHOR_MIN_LENGTH, AUTHOR_MAX_LENGTH = 2, 50
BODY_MIN_LENGTH, BODY_MAX_LENGTH = 3, 500


def _ensure_item_type(item_type: str) -> None:
    if item_type not in ITEM_TYPES:
        raise ValidationError(f"Invalid item type '{item_type}'. Allowed: {', '.join(ITEM_TYPES)}")


def is_auto_approved(settings: Settings) -> bool:
    return bool(settings.COMMENT_AUTO_APPROVE)


def list_comments(db: Session, item_type: str, item_id: int) -> List[Comment]:
    _ensure_item_type(item_type)
    return CommentRepository(db).list_for_item(item_type, item_id)


def create_comment(db: Session, settings: Settings, data: CommentCreate) -> tuple[int, bool]:
    """Validate and store a visitor comment. Returns (id, approved)."""
    author_name = (data.author_name or "").strip()
    body = (data.body or "").strip()
    if not data.item_type or data.item_id is None or not author_name or not body:
        raise ValidationError("Item type, item id, name and comment are required")

    _ensure_item_type(data.item_type)
    if not AUTHOR_MIN_LENGTH <= len(author_name) <= AUTHOR_MAX_LENGTH:
        raise ValidationError(f"Name must be between {AUTHOR_MIN_LENGTH} and {AUTHOR_MAX_LENGTH} characters")
    if not BODY_MIN_LENGTH <= len(body) <= BODY_MAX_LENGTH:
        raise ValidationError(f"Comment must be between {BODY_MIN_LENGTH} and {BODY_MAX_LENGTH} characters")

    if ITEM_REPOSITORIES[data.item_type](db).get_by_id(data.item_id) is None:
        raise NotFoundError(f"{ITEM_LABELS[data.item_type]} not found")

    approved = is_auto_approved(settings)
    comment_id = CommentRepository(db).create(
        item_type=data.item_type,
        item_id=data.item_id,
        author_name=author_name,
        body=body,
        date=today_str(),
        approved=approved,
    )
    logger.info("Comment %d on %s %d stored (approved=%s)", comment_id, data.item_type, data.item_id, approved)
    return comment_id, approved


def delete_comment(db: Session, comment_id: int) -> None:
    if CommentRepository(db).delete(comment_id) == 0:
        raise NotFoundError("Comment not found")
    logger.info("Comment %d deleted", comment_id)
