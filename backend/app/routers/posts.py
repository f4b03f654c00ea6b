"""Posts 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional
from app.config import Settings
from app.dependencies import get_comment_repository, get_post_repository, get_settings
from app.middleware.auth_middleware import get_current_user
from app.repositories import CommentRepository, PostRepository
from app.schemas.content import CreatedOut, MessageOut, PostOut
from app.services import content_service
from app.services.auth_service import Identity

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[PostOut])
def list_posts(repo: PostRepository = Depends(get_post_repository)):
    return repo.get_all()


@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: int, repo: PostRepository = Depends(get_post_repository)):
    return content_service.get_entry(repo, "post", post_id)


@router.post("", response_model=CreatedOut, status_code=201)
async def create_post(
    _current_user: Identity = Depends(get_current_user),
    title: Optional[str] = Form(None),
    body: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    repo: PostRepository = Depends(get_post_repository),
    settings: Settings = Depends(get_settings),
):
    post_id, attachment_path = await content_service.create_article(repo, settings, "post", title, body, file)
    return CreatedOut(message="Post created successfully", id=post_id, attachment_path=attachment_path)


@router.delete("/{post_id}", response_model=MessageOut)
def delete_post(
    post_id: int,
    _current_user: Identity = Depends(get_current_user),
    repo: PostRepository = Depends(get_post_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    settings: Settings = Depends(get_settings),
):
    content_service.delete_entry(repo, comments, settings, "post", post_id)
    return {"message": "Post deleted successfully"}
