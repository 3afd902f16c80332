"""
Uploads Router - Presigned URLs for direct browser uploads to S3
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..schemas.resume import PresignedUrlRequest, PresignedUrlResponse
from ..services.blob_store import S3BlobStore, get_blob_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/uploads", tags=["Uploads"])


@router.post("/presigned-url", response_model=PresignedUrlResponse)
async def get_presigned_url(
    data: PresignedUrlRequest,
    blob_store: S3BlobStore = Depends(get_blob_store)
):
    """Get a time-limited PUT URL and the blob key to send to /api/resume/analyze"""
    if not data.filename or not data.contentType:
        raise HTTPException(status_code=400, detail="filename and contentType are required")

    try:
        return await run_in_threadpool(blob_store.create_upload_url, data.filename, data.contentType)
    except Exception:
        logger.exception(f"Error generating presigned URL for {data.filename}")
        raise HTTPException(status_code=500, detail="Failed to generate presigned URL")
