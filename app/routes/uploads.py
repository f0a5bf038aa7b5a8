"""
Upload routes - serving stored images and accepting new uploads
"""
import logging
import os
from typing import Dict
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse, Response
from app.dependencies import get_upload_dir
from app.services.storage_service import content_type_for, resolve_upload, upload_to_storage
from app.utils.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])

@router.get("/image/{file_path:path}")
async def serve_image(file_path: str, upload_dir: str = Depends(get_upload_dir)):
    """Serve a previously uploaded file"""
    try:
        path = resolve_upload(upload_dir, file_path)
        if path is None:
            return PlainTextResponse("File not found", status_code=status.HTTP_404_NOT_FOUND)
        content = path.read_bytes()
    except Exception:
        logger.exception("❌ Error serving image %s", file_path)
        return PlainTextResponse("Error serving image", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(
        content=content,
        media_type=content_type_for(path),
        headers={"Cache-Control": "public, max-age=3600"},
    )

@router.post("/uploads", status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    current_user: Dict = Depends(get_current_user),
    upload_dir: str = Depends(get_upload_dir),
):
    """Upload a file and return its public path"""
    owner_id = current_user.get("sub") or current_user["email"]
    try:
        url = upload_to_storage(file, owner_id, upload_dir)
    except Exception:
        logger.exception("❌ Upload failed for %s", owner_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload file"
        )
    return {"url": url, "filename": os.path.basename(url)}
