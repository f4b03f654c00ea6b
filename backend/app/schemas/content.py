"""Post/Update/Download 응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class AttachmentMixin(CamelModel):
    attachment_path: Optional[str] = None
    attachment_mime_type: Optional[str] = None


class PostOut(AttachmentMixin):
    id: int
    title: str
    body: str
    date: str
    created_at: Optional[datetime] = None


class UpdateOut(PostOut):
    pass


class DownloadOut(AttachmentMixin):
    id: int
    name: str
    version: str
    description: str
    external_link: Optional[str] = None
    date: str
    created_at: Optional[datetime] = None


class CreatedOut(CamelModel):
    message: str
    id: int
    attachment_path: Optional[str] = None


class MessageOut(BaseModel):
    message: str
