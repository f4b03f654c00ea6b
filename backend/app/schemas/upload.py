"""Upload 처리 결과 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel


class StoredFile(BaseModel):
    filename: str
    path: str
    mime_type: str
    size: int
