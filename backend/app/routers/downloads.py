"""Downloads 기능 API 라우터입니다. 파일 또는 외부 링크 중 하나를 가진 다운로드 항목을 관리합니다."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional
from app.config import Settings
from app.dependencies import get_comment_repository, get_download_repository, get_settings
from app.middleware.auth_middleware import get_current_user
from app.repositories import CommentRepository, DownloadRepository
from app.schemas.content import CreatedOut, DownloadOut, MessageOut
from app.services import content_service
from app.services.auth_service import Identity

router = APIRouter(prefix="/api/downloads", tags=["downloads"])


@router.get("", response_model=List[DownloadOut])
def list_downloads(repo: DownloadRepository = Depends(get_download_repository)):
    return repo.get_all()


@router.get("/{download_id}", response_model=DownloadOut)
def get_download(download_id: int, repo: DownloadRepository = Depends(get_download_repository)):
    return content_service.get_entry(repo, "download", download_id)


@router.post("", response_model=CreatedOut, status_code=201)
async def create_download(
    _current_user: Identity = Depends(get_current_user),
    name: Optional[str] = Form(None),
    version: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    external_link: Optional[str] = Form(None, alias="externalLink"),
    file: Optional[UploadFile] = File(None),
    repo: DownloadRepository = Depends(get_download_repository),
    settings: Settings = Depends(get_settings),
):
    download_id, attachment_path = await content_service.create_download(
        repo, settings, name, version, description, external_link=external_link, file=file,
    )
    return CreatedOut(message="Download created successfully", id=download_id, attachment_path=attachment_path)


@router.delete("/{download_id}", response_model=MessageOut)
def delete_download(
    download_id: int,
    _current_user: Identity = Depends(get_current_user),
    repo: DownloadRepository = Depends(get_download_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    settings: Settings = Depends(get_settings),
):
    content_service.delete_entry(repo, comments, settings, "download", download_id)
    return {"message": "Download deleted successfully"}
