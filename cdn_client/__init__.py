"""CDN client package - R2 uploads and public CDN reads."""

from cdn_client.base import CdnClient
from cdn_client.storage import (
    R2Storage,
    StorageNotConfiguredError,
    UploadFile,
    UploadResult,
)

__all__ = [
    "CdnClient",
    "R2Storage",
    "StorageNotConfiguredError",
    "UploadFile",
    "UploadResult",
]
