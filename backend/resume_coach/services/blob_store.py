"""
S3 Blob Store - presigned resume uploads and downloads for text extraction.

The browser PUTs the file straight to S3 with a short-lived URL; the analyze
endpoint later downloads the object by its key.
"""
import logging
import secrets

import boto3

from ..config import get_settings

logger = logging.getLogger(__name__)

# Lazy initialization of S3 client
_s3_client = None


def get_s3_client():
    """Get the S3 client, initializing lazily if needed."""
    global _s3_client
    if _s3_client is None:
        settings = get_settings()
        _s3_client = boto3.client("s3", region_name=settings.aws_region)
        logger.info(f"S3 client initialized for region {settings.aws_region}")
    return _s3_client


class S3BlobStore:
    def __init__(self, client, bucket: str, prefix: str = "uploads", expire_minutes: int = 10):
        self.client = client
        self.bucket = bucket
        self.prefix = prefix
        self.expire_minutes = expire_minutes

    def _require_bucket(self):
        if not self.bucket:
            raise ValueError("S3 bucket not configured. Please set S3_BUCKET.")

    def generate_file_path(self, filename: str) -> str:
        """Unique blob key: <prefix>/<16 hex chars>_<filename>"""
        unique_id = secrets.token_hex(8)
        return f"{self.prefix}/{unique_id}_{filename}"

    def create_upload_url(self, filename: str, content_type: str) -> dict:
        """
        Create a write-only presigned URL for a new resume upload.

        Args:
            filename: Original client filename, kept as the key suffix
            content_type: MIME type the upload must be sent with

        Returns:
            {"url": presigned PUT URL, "filePath": blob key}
        """
        self._require_bucket()
        file_path = self.generate_file_path(filename)
        url = self.client.generate_presigned_url(
            ClientMethod="put_object",
            Params={
                "Bucket": self.bucket,
                "Key": file_path,
                "ContentType": content_type,
            },
            ExpiresIn=self.expire_minutes * 60,
        )
        return {"url": url, "filePath": file_path}

    def download(self, file_path: str, destination: str) -> None:
        """Download a blob to a local path."""
        self._require_bucket()
        self.client.download_file(self.bucket, file_path, destination)


def get_blob_store() -> S3BlobStore:
    """FastAPI dependency for the configured blob store."""
    settings = get_settings()
    return S3BlobStore(
        client=get_s3_client(),
        bucket=settings.s3_bucket,
        prefix=settings.upload_prefix,
        expire_minutes=settings.upload_url_expire_minutes,
    )
