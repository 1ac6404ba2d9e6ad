"""Local image storage for uploaded menu and blog pictures"""

import os
import shutil
import uuid

from fastapi import HTTPException, UploadFile
import structlog

from app.config import settings

logger = structlog.get_logger()

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


def save_image(upload: UploadFile) -> str:
    """Store an uploaded image and return the public path it is served from"""
    if not (upload.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Only image files are allowed")

    extension = os.path.splitext(upload.filename or "")[1].lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Only image files are allowed")

    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    if size > settings.max_upload_bytes:
        raise HTTPException(status_code=400, detail="Image is too large")

    os.makedirs(settings.upload_dir, exist_ok=True)
    filename = f"image-{uuid.uuid4().hex}{extension}"
    with open(os.path.join(settings.upload_dir, filename), "wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("image_stored", filename=filename, size=size)
    return f"{settings.upload_url_prefix}/{filename}"
