"""Updates(atualizacoes) 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional
from app.config import Settings
from app.dependencies import get_comment_repository, get_settings, get_update_repository
from app.middleware.auth_middleware import get_current_user
from app.repositories import CommentRepository, UpdateRepository
from app.schemas.content import CreatedOut, MessageOut, UpdateOut
from app.services import content_service
from app.services.auth_service import Identity

router = APIRouter(prefix="/api/atualizacoes", tags=["updates"])


@router.get("", response_model=List[UpdateOut])
def list_updates(repo: UpdateRepository = Depends(get_update_repository)):
    return repo.get_all()


@router.get("/{update_id}", response_model=UpdateOut)
def get_update(update_id: int, repo: UpdateRepository = Depends(get_update_repository)):
    return content_service.get_entry(repo, "update", update_id)


@router.post("", response_model=CreatedOut, status_code=201)
async def create_update(
    _current_user: Identity = Depends(get_current_user),
    title: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    repo: UpdateRepository = Depends(get_update_repository),
    settings: Settings = Depends(get_settings),
):
    update_id, attachment_path = await content_service.create_article(repo, settings, "update", title, body, file)
    return CreatedOut(message="Update created successfully", id=update_id, attachment_path=attachment_path)


@router.delete("/{update_id}", response_model=MessageOut)
def delete_update(
    update_id: int,
    _current_user: Identity = Depends(get_current_user),
    repo: UpdateRepository = Depends(get_update_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    settings: Settings = Depends(get_settings),
):
    content_service.delete_entry(repo, comments, settings, "update", update_id)
    return {"message": "Update deleted successfully"}
