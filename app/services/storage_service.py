"""
Upload area on local disk - writes user uploads and resolves files to serve
"""
import os
import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".bmp": "image/bmp",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def safe_owner_id(owner_id: str) -> str:
    """Owner ids become part of a filename; keep them to a safe alphabet"""
    cleaned = "".join(c if c.isalnum() or c in "-_" else "_" for c in str(owner_id))
    return cleaned or "anonymous"


def upload_to_storage(file: UploadFile, user_id: str, upload_dir: str) -> str:
    """Save an upload under a generated unique name, return its public path"""
    file_ext = os.path.splitext(file.filename or "")[1]
    filename = f"{safe_owner_id(user_id)}-{uuid.uuid4()}{file_ext}"
    os.makedirs(upload_dir, exist_ok=True)
    file_path = os.path.join(upload_dir, filename)

    with open(file_path, "wb") as buffer:
        shutil.copyfileobj(file.file, buffer)

    return f"/uploads/{filename}"


def resolve_upload(upload_dir: str, relative_path: str) -> Optional[Path]:
    """The file under upload_dir, or None if missing or outside the directory"""
    root = Path(upload_dir).resolve()
    candidate = (root / relative_path).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    if not candidate.is_file():
        return None
    return candidate
