import logging
import os
import time
import uuid
from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from app.config import Settings
from app.schemas.upload import StoredFile
from app.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


def today_str() -> str:
    return date.today().strftime("%d/%m/%Y")


def has_file(file: Optional[UploadFile]) -> bool:
    # browsers send an empty part for an untouched file input
    return file is not None and bool(file.filename)


def validate_file(file: UploadFile, settings: Settings) -> str:
    mime_type = (file.content_type or "").split(";", 1)[0].strip().lower()
    if mime_type not in settings.ALLOWED_MIME_TYPES:
        logger.warning("Rejected upload %r with type %r", file.filename, mime_type)
        raise ValidationError(
            f"File type '{mime_type or 'unknown'}' not allowed. Allowed: {', '.join(settings.ALLOWED_MIME_TYPES)}"
        )
    return mime_type


async def save_upload(file: UploadFile, settings: Settings) -> StoredFile:
    mime_type = validate_file(file, settings)
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        logger.warning("Rejected upload %r: %d bytes", file.filename, len(content))
        raise ValidationError(f"File exceeds {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit")

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)

    ext = os.path.splitext(file.filename)[1].lower()
    filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}{ext}"
    path = os.path.join(settings.UPLOAD_DIR, filename)

    with open(path, "wb") as f:
        f.write(content)

    logger.info("Stored upload %r as %s (%d bytes)", file.filename, filename, len(content))
    return StoredFile(
        filename=file.filename,
        path=f"{UPLOAD_URL_PREFIX}/{filename}",
        mime_type=mime_type,
        size=len(content),
    )


def remove_upload(attachment_path: Optional[str], settings: Settings) -> None:
    if not attachment_path or not attachment_path.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return
    name = os.path.basename(attachment_path)
    Path(settings.UPLOAD_DIR, name).unlink(missing_ok=True)
