"""Cloudflare R2 object storage (S3-compatible API)."""

import asyncio
import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone

import boto3
from botocore.client import Config
from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)
from loguru import logger
from pydantic import BaseModel
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from settings import (
    CLOUDFLARE_ACCOUNT_ID,
    R2_ACCESS_KEY_ID,
    R2_BUCKET_NAME,
    R2_PUBLIC_URL,
    R2_SECRET_ACCESS_KEY,
)

IMMUTABLE_CACHE = "public, max-age=31536000, immutable"
MUTABLE_CACHE = "public, max-age=300"


class StorageNotConfiguredError(RuntimeError):
    """R2 credentials or bucket missing."""


@dataclass
class UploadFile:
    """In-memory file to upload."""

    buffer: bytes
    originalname: str
    mimetype: str
    size: int


class UploadResult(BaseModel):
    """Stored object location."""

    file_name: str
    url: str | None = None
    size: int
    mime_type: str
    provider: str = "cloudflare"


def _is_retryable_error(exc: BaseException) -> bool:
    """Connection problems and 5xx responses from R2."""
    if isinstance(exc, (EndpointConnectionError, ConnectionClosedError, ConnectTimeoutError, ReadTimeoutError)):
        return True
    if isinstance(exc, ClientError):
        return exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0) >= 500
    return False


def sanitize_name(name: str) -> str:
    """Lowercase, keep [a-z0-9.], collapse everything else to single dashes."""
    return re.sub(r"-+", "-", re.sub(r"[^a-z0-9.]", "-", name.lower()))


class R2Storage:
    """Uploads to an R2 bucket and builds public URLs for its objects."""

    def __init__(
        self,
        account_id: str | None = CLOUDFLARE_ACCOUNT_ID,
        access_key_id: str | None = R2_ACCESS_KEY_ID,
        secret_access_key: str | None = R2_SECRET_ACCESS_KEY,
        bucket: str | None = R2_BUCKET_NAME,
        public_url: str | None = R2_PUBLIC_URL,
    ):
        self.bucket = bucket
        self.public_url = public_url.rstrip("/") if public_url else None
        self.enabled = bool(account_id and access_key_id and secret_access_key and bucket)
        self._s3 = None

        if self.enabled:
            self._s3 = boto3.client(
                "s3",
                endpoint_url=f"https://{account_id}.r2.cloudflarestorage.com",
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
                region_name="auto",
                config=Config(signature_version="s3v4"),
            )
            logger.info("Cloudflare R2 initialized (bucket={})", bucket)
        else:
            logger.warning("Cloudflare R2 not configured")

    def is_enabled(self) -> bool:
        return self.enabled

    def get_public_url(self, file_name: str) -> str | None:
        if not self.enabled or not self.public_url:
            return None
        return f"{self.public_url}/{file_name}"

    async def upload_file(self, file: UploadFile, folder: str = "uploads", timestamped: bool = True) -> UploadResult:
        """Upload a file under `folder`.

        Timestamped names are unique and cached as immutable; untimestamped
        names overwrite the previous object at the same key.
        """
        if not self.enabled:
            raise StorageNotConfiguredError("Cloudflare R2 is not configured")

        name = sanitize_name(file.originalname)
        if timestamped:
            name = f"{int(time.time() * 1000)}-{name}"
        key = f"{folder}/{name}"
        cache_control = IMMUTABLE_CACHE if timestamped else MUTABLE_CACHE

        await asyncio.to_thread(self._put, key, file, cache_control)
        logger.debug("Uploaded {} ({} bytes)", key, file.size)

        return UploadResult(
            file_name=key,
            url=self.get_public_url(key),
            size=file.size,
            mime_type=file.mimetype,
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    def _put(self, key: str, file: UploadFile, cache_control: str) -> None:
        self._s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=file.buffer,
            ContentType=file.mimetype,
            CacheControl=cache_control,
            Metadata={
                "originalName": file.originalname,
                "uploadedAt": datetime.now(timezone.utc).isoformat(),
            },
        )
