"""Content Service 도메인 서비스 레이어입니다. 게시물/업데이트/다운로드의 생성·삭제 규칙과 첨부 파일 흐름을 캡슐화합니다."""

import logging
from typing import Optional

from fastapi import UploadFile

from app.config import Settings
from app.repositories import CommentRepository, DownloadRepository, EntityRepository
from app.utils.exceptions import NotFoundError, ValidationError
from app.utils.helpers import has_file, remove_upload, save_upload, today_str

logger = logging.getLogger(__name__)

ITEM_LABELS = {
    "post": "Post",
    "update": "Update",
    "download": "Download",
}


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def get_entry(repo: EntityRepository, item_type: str, entity_id: int):
    row = repo.get_by_id(entity_id)
    if row is None:
        raise NotFoundError(f"{ITEM_LABELS[item_type]} not found")
    return row


async def create_article(
    repo: EntityRepository,
    settings: Settings,
    item_type: str,
    title: Optional[str],
    body: Optional[str],
    file: Optional[UploadFile] = None,
) -> tuple[int, Optional[str]]:
    """Create a post or an update. Returns (id, attachment_path)."""
    title, body = _clean(title), _clean(body)
    if not title or not body:
        raise ValidationError("Title and body are required")

    attachment_path = attachment_mime_type = None
    if has_file(file):
        stored = await save_upload(file, settings)
        attachment_path, attachment_mime_type = stored.path, stored.mime_type

    try:
        entity_id = repo.create(
            title=title,
            body=body,
            date=today_str(),
            attachment_path=attachment_path,
            attachment_mime_type=attachment_mime_type,
        )
    except Exception:
        remove_upload(attachment_path, settings)
        raise
    logger.info("%s %d created", ITEM_LABELS[item_type], entity_id)
    return entity_id, attachment_path


async def create_download(
    repo: DownloadRepository,
    settings: Settings,
    name: Optional[str],
    version: Optional[str],
    description: Optional[str],
    external_link: Optional[str] = None,
    file: Optional[UploadFile] = None,
) -> tuple[int, Optional[str]]:
    name, version, description = _clean(name), _clean(version), _clean(description)
    external_link = _clean(external_link) or None
    if not name or not version or not description:
        raise ValidationError("Name, version and description are required")

    with_file = has_file(file)
    if not with_file and external_link is None:
        raise ValidationError("Either a file or an external link is required")
    if with_file and external_link is not None:
        raise ValidationError("Provide either a file or an external link, not both")

    attachment_path = attachment_mime_type = None
    if with_file:
        stored = await save_upload(file, settings)
        attachment_path, attachment_mime_type = stored.path, stored.mime_type

    try:
        entity_id = repo.create(
            name=name,
            version=version,
            description=description,
            date=today_str(),
            attachment_path=attachment_path,
            attachment_mime_type=attachment_mime_type,
            external_link=external_link,
        )
    except Exception:
        remove_upload(attachment_path, settings)
        raise
    logger.info("Download %d created", entity_id)
    return entity_id, attachment_path


def delete_entry(
    repo: EntityRepository,
    comments: CommentRepository,
    settings: Settings,
    item_type: str,
    entity_id: int,
) -> None:
    row = repo.get_by_id(entity_id)
    if row is None:
        raise NotFoundError(f"{ITEM_LABELS[item_type]} not found")
    attachment_path = row.attachment_path

    # comments and the record go out in one commit; both repositories share the request session
    comments.delete_for_item(item_type, entity_id, commit=False)
    if repo.delete(entity_id) == 0:
        raise NotFoundError(f"{ITEM_LABELS[item_type]} not found")
    remove_upload(attachment_path, settings)
    logger.info("%s %d deleted", ITEM_LABELS[item_type], entity_id)
